import hypothesis.strategies as st

from _rpsllex.tokenizer.common import WHITESPACE

nic_handles = st.from_regex(r"[A-Za-z][A-Za-z0-9_-]{0,20}", fullmatch=True)

as_numbers = st.integers(min_value=0, max_value=2**32 - 1).map(lambda n: f"AS{n}")

as_set_names = st.from_regex(r"AS-[A-Za-z0-9_-]{0,10}[A-Za-z0-9]", fullmatch=True)

email_addresses = st.builds(
    "{}@{}.{}".format,
    st.from_regex(r"[a-z0-9.+_-]{1,10}", fullmatch=True),
    st.from_regex(r"[a-z0-9-]{1,10}", fullmatch=True),
    st.sampled_from(["net", "org", "com", "no"]),
)

dates = st.dates().map(lambda d: d.strftime("%Y%m%d")).filter(lambda d: len(d) == 8)

# Free-form values do not start with whitespace, as the whitespace
# following the colon is not part of the value.
free_form = st.text(
    alphabet=st.characters(blacklist_categories=("Cc", "Cs", "Zl", "Zp")),
    min_size=1,
    max_size=30,
).filter(lambda s: s == s.lstrip(WHITESPACE) and len(s) > 0)


@st.composite
def attribute_lines(draw, keyword, values, padding=st.integers(1, 8)):
    return keyword + ":" + " " * draw(padding) + draw(values) + "\n"


@st.composite
def maintainers(draw):
    """
    Maintainer objects together with the NIC handles expected from them.
    """
    name = draw(nic_handles)
    maintainers = draw(st.lists(nic_handles, min_size=1, max_size=4))
    lines = [
        f"mntner: {name}\n",
        draw(attribute_lines("descr", free_form)),
        f"mnt-by: {','.join(maintainers)}\n",
        "source: TEST\n",
    ]
    return "".join(lines), [name] + maintainers
