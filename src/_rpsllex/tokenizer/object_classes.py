from dataclasses import dataclass
from typing import Callable, Dict

from _rpsllex.tokenizer.policy import lex_export, lex_import, lex_mp_export, lex_mp_import
from _rpsllex.tokenizer.token_kind import TokenKind
from _rpsllex.tokenizer.value_lexers import (
    lex_as_number,
    lex_as_set_name,
    lex_authentication,
    lex_email,
    lex_email_and_date,
    lex_free_form,
    lex_nic_handle,
    lex_nic_handles,
    lex_registry_name,
    lex_telephone,
)


@dataclass(frozen=True)
class ObjectClass:
    """
    The grammar of an rpsl object class: how to lex the value following
    the class keyword, and which attributes are allowed together with how
    to lex their values.
    """

    value_lexer: Callable
    attributes: Dict[TokenKind, Callable]

    def attributes_by_length(self):
        """
        The attributes with the longest keyword first, so that an attribute
        is never shadowed by another attribute whose keyword is a prefix of
        its own.
        """
        return sorted(
            self.attributes.items(), key=lambda item: len(item[0].keyword), reverse=True
        )


common_attributes = {
    TokenKind.DESCRIPTION: lex_free_form,
    TokenKind.ADMIN_CONTACT: lex_nic_handles,
    TokenKind.TECHNICAL_CONTACT: lex_nic_handles,
    TokenKind.REMARKS: lex_free_form,
    TokenKind.NOTIFY_EMAIL: lex_email,
    TokenKind.MAINTAINED_BY: lex_nic_handles,
    TokenKind.CHANGED_AT_AND_BY: lex_email_and_date,
    TokenKind.REGISTRY_SOURCE: lex_registry_name,
}

contact_attributes = {
    TokenKind.ADDRESS: lex_free_form,
    TokenKind.PHONE: lex_telephone,
    TokenKind.FAX: lex_telephone,
    TokenKind.EMAIL: lex_email,
    TokenKind.NIC_HANDLE_ATTR: lex_nic_handle,
}

person_attributes = {
    kind: lexer
    for kind, lexer in {**common_attributes, **contact_attributes}.items()
    if kind not in (TokenKind.ADMIN_CONTACT, TokenKind.TECHNICAL_CONTACT)
}

# Classes without a grammar of their own are named by a free-form string and
# allow only the attributes common to all classes.
object_classes = {
    kind: ObjectClass(lex_free_form, common_attributes)
    for kind in TokenKind.object_classes()
}
object_classes.update(
    {
        TokenKind.MAINTAINER: ObjectClass(
            lex_nic_handle,
            {
                **common_attributes,
                TokenKind.UPDATED_TO_EMAIL: lex_email,
                TokenKind.MAINTAINER_NOTIFY_EMAIL: lex_email,
                TokenKind.AUTHENTICATION: lex_authentication,
            },
        ),
        TokenKind.PERSON: ObjectClass(lex_free_form, person_attributes),
        TokenKind.ROLE: ObjectClass(
            lex_free_form, {**common_attributes, **contact_attributes}
        ),
        TokenKind.AUT_NUM: ObjectClass(
            lex_as_number,
            {
                **common_attributes,
                TokenKind.AS_NAME: lex_nic_handle,
                TokenKind.IMPORT: lex_import,
                TokenKind.EXPORT: lex_export,
                TokenKind.MP_IMPORT: lex_mp_import,
                TokenKind.MP_EXPORT: lex_mp_export,
            },
        ),
        TokenKind.AS_SET: ObjectClass(lex_as_set_name, common_attributes),
    }
)
