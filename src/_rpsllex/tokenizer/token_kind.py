from enum import Enum, auto, unique

from _rpsllex.tokenizer.errors import MissingKeywordError


@unique
class TokenKind(Enum):
    EOF = auto()
    ILLEGAL = auto()

    # object classes
    MAINTAINER = auto()
    PERSON = auto()
    ROLE = auto()
    AUT_NUM = auto()
    AS_SET = auto()
    ROUTE = auto()
    ROUTE6 = auto()
    ROUTE_SET = auto()
    FILTER_SET = auto()
    ROUTER = auto()
    ROUTER_SET = auto()
    PEERING_SET = auto()
    DICTIONARY = auto()

    # attributes
    DESCRIPTION = auto()
    ADMIN_CONTACT = auto()
    TECHNICAL_CONTACT = auto()
    ADDRESS = auto()
    PHONE = auto()
    FAX = auto()
    EMAIL = auto()
    NOTIFY_EMAIL = auto()
    UPDATED_TO_EMAIL = auto()
    MAINTAINER_NOTIFY_EMAIL = auto()
    AUTHENTICATION = auto()
    MAINTAINED_BY = auto()
    CHANGED_AT_AND_BY = auto()
    REGISTRY_SOURCE = auto()
    REMARKS = auto()
    AS_NAME = auto()
    NIC_HANDLE_ATTR = auto()
    EXPORT = auto()
    IMPORT = auto()
    MP_EXPORT = auto()
    MP_IMPORT = auto()
    CONTINUATION = auto()

    # data values
    STRING = auto()
    NIC_HANDLE = auto()
    EMAIL_ADDRESS = auto()
    DATE = auto()
    TELEPHONE = auto()
    AS_NUMBER = auto()
    AS_SET_NAME = auto()
    REGISTRY_NAME = auto()
    PGP_KEY = auto()
    CRYPT_PASSWORD = auto()
    MD5_PASSWORD = auto()
    MAIL_FROM_PASSWORD = auto()
    NO_AUTH = auto()
    EXPORT_POLICY = auto()
    IMPORT_POLICY = auto()
    MP_EXPORT_POLICY = auto()
    MP_IMPORT_POLICY = auto()

    @classmethod
    def object_classes(cls):
        return (
            cls.MAINTAINER,
            cls.PERSON,
            cls.ROLE,
            cls.AUT_NUM,
            cls.AS_SET,
            cls.ROUTE,
            cls.ROUTE6,
            cls.ROUTE_SET,
            cls.FILTER_SET,
            cls.ROUTER,
            cls.ROUTER_SET,
            cls.PEERING_SET,
            cls.DICTIONARY,
        )

    @classmethod
    def attributes(cls):
        return (
            cls.DESCRIPTION,
            cls.ADMIN_CONTACT,
            cls.TECHNICAL_CONTACT,
            cls.ADDRESS,
            cls.PHONE,
            cls.FAX,
            cls.EMAIL,
            cls.NOTIFY_EMAIL,
            cls.UPDATED_TO_EMAIL,
            cls.MAINTAINER_NOTIFY_EMAIL,
            cls.AUTHENTICATION,
            cls.MAINTAINED_BY,
            cls.CHANGED_AT_AND_BY,
            cls.REGISTRY_SOURCE,
            cls.REMARKS,
            cls.AS_NAME,
            cls.NIC_HANDLE_ATTR,
            cls.EXPORT,
            cls.IMPORT,
            cls.MP_EXPORT,
            cls.MP_IMPORT,
            cls.CONTINUATION,
        )

    @classmethod
    def authentication_methods(cls):
        return (
            cls.PGP_KEY,
            cls.CRYPT_PASSWORD,
            cls.MD5_PASSWORD,
            cls.MAIL_FROM_PASSWORD,
            cls.NO_AUTH,
        )

    @classmethod
    def keywords(cls):
        return {
            cls.MAINTAINER: "mntner",
            cls.PERSON: "person",
            cls.ROLE: "role",
            cls.AUT_NUM: "aut-num",
            cls.AS_SET: "as-set",
            cls.ROUTE: "route",
            cls.ROUTE6: "route6",
            cls.ROUTE_SET: "route-set",
            cls.FILTER_SET: "filter-set",
            cls.ROUTER: "inet-rtr",
            cls.ROUTER_SET: "rtr-set",
            cls.PEERING_SET: "peering-set",
            cls.DICTIONARY: "dictionary",
            cls.DESCRIPTION: "descr",
            cls.ADMIN_CONTACT: "admin-c",
            cls.TECHNICAL_CONTACT: "tech-c",
            cls.ADDRESS: "address",
            cls.PHONE: "phone",
            cls.FAX: "fax-no",
            cls.EMAIL: "e-mail",
            cls.NOTIFY_EMAIL: "notify",
            cls.UPDATED_TO_EMAIL: "upd-to",
            cls.MAINTAINER_NOTIFY_EMAIL: "mnt-nfy",
            cls.AUTHENTICATION: "auth",
            cls.MAINTAINED_BY: "mnt-by",
            cls.CHANGED_AT_AND_BY: "changed",
            cls.REGISTRY_SOURCE: "source",
            cls.REMARKS: "remarks",
            cls.AS_NAME: "as-name",
            cls.NIC_HANDLE_ATTR: "nic-hdl",
            cls.EXPORT: "export",
            cls.IMPORT: "import",
            cls.MP_EXPORT: "mp-export",
            cls.MP_IMPORT: "mp-import",
            cls.CONTINUATION: "+",
            cls.PGP_KEY: "PGPKey-",
            cls.CRYPT_PASSWORD: "CRYPT-PW",
            cls.MD5_PASSWORD: "MD5-pw",
            cls.MAIL_FROM_PASSWORD: "MAIL-FROM",
            cls.NO_AUTH: "NONE",
        }

    @classmethod
    def from_keyword(cls, word):
        """
        Reverse lookup in the keyword table, ie.
        TokenKind.from_keyword("MNTNER") is TokenKind.MAINTAINER.

        :returns: The kind with the given keyword (compared
            case-insensitively) or None if there is no such kind.
        """
        word = word.lower()
        for kind, keyword in cls.keywords().items():
            if keyword.lower() == word:
                return kind
        return None

    @property
    def keyword(self):
        """
        The canonical keyword of a class, attribute or authentication
        kind, eg. "admin-c" for TokenKind.ADMIN_CONTACT.
        """
        try:
            return _KEYWORDS[self]
        except KeyError as err:
            raise MissingKeywordError(f"{self} has no keyword") from err

    def __str__(self):
        return self.name


_KEYWORDS = TokenKind.keywords()


def check_keyword_table():
    """
    Every kind the dispatchers match on must have exactly one keyword,
    and no two kinds may share a keyword.
    """
    required = (
        TokenKind.object_classes()
        + TokenKind.attributes()
        + TokenKind.authentication_methods()
    )
    missing = [kind for kind in required if kind not in _KEYWORDS]
    if missing:
        raise MissingKeywordError(f"No keyword given for {missing}")
    lowered = [keyword.lower() for keyword in _KEYWORDS.values()]
    if len(set(lowered)) != len(lowered):
        raise MissingKeywordError("Keyword table contains duplicate keywords")


check_keyword_table()
