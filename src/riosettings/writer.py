"""Basic settings that most RDF writers support."""

from __future__ import annotations

from typing import Final

from riosettings.settings import Setting, SettingCatalog

KEY_PREFIX: Final = "org.eclipse.rdf4j.rio."


def build_basic_writer_settings() -> SettingCatalog:
    """Declare the basic writer settings.

    Returns:
        Catalog with PRETTY_PRINT, INLINE_BLANK_NODES, XSD_STRING_TO_PLAIN_LITERAL,
        RDF_LANGSTRING_TO_LANG_LITERAL and BASE_DIRECTIVE
    """
    return SettingCatalog(
        "basic_writer",
        PRETTY_PRINT=Setting.create(
            KEY_PREFIX + "prettyprint",
            "Pretty print",
            True,
            description="Format the output for readability.",
        ),
        INLINE_BLANK_NODES=Setting.create(
            KEY_PREFIX + "inlineblanknodes",
            "Use blank node property lists, collections, and anonymous nodes "
            "instead of blank node labels",
            False,
            description=(
                "Inline blank nodes by their value and write no blank node labels. "
                "Only safe when blank nodes never appear as a context and there are "
                "no blank node cycles. Every statement is buffered before writing, "
                "so leave this off for large documents."
            ),
        ),
        XSD_STRING_TO_PLAIN_LITERAL=Setting.create(
            KEY_PREFIX + "rdf10plainliterals",
            "RDF-1.0 compatible Plain Literals",
            True,
            description=(
                "Drop the xsd:string datatype and write such literals as RDF-1.0 "
                "plain literals."
            ),
        ),
        RDF_LANGSTRING_TO_LANG_LITERAL=Setting.create(
            KEY_PREFIX + "rdf10languageliterals",
            "RDF-1.0 compatible Language Literals",
            True,
            description=(
                "Omit the rdf:langString datatype from language-tagged literals. "
                "Syntaxes where a language tag with an explicit datatype is invalid "
                "or ambiguous always omit it."
            ),
        ),
        BASE_DIRECTIVE=Setting.create(
            KEY_PREFIX + "basedirective",
            "Serialize base directive",
            True,
            description="Write a base URI directive.",
        ),
    )


BASIC_WRITER_SETTINGS: Final = build_basic_writer_settings()

PRETTY_PRINT: Final = BASIC_WRITER_SETTINGS.PRETTY_PRINT
INLINE_BLANK_NODES: Final = BASIC_WRITER_SETTINGS.INLINE_BLANK_NODES
XSD_STRING_TO_PLAIN_LITERAL: Final = BASIC_WRITER_SETTINGS.XSD_STRING_TO_PLAIN_LITERAL
RDF_LANGSTRING_TO_LANG_LITERAL: Final = BASIC_WRITER_SETTINGS.RDF_LANGSTRING_TO_LANG_LITERAL
BASE_DIRECTIVE: Final = BASIC_WRITER_SETTINGS.BASE_DIRECTIVE
