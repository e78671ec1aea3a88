"""
Grapheme_Cluster_Break property values.
"""

from enum import Enum


class Category(Enum):
    """Grapheme break category of a code point.

    Values are the property names used by the Unicode Character Database so
    that generated tables can map names straight to members. ``NONE`` covers
    every code point without a special value; ``END_OF_TEXT`` and ``UNKNOWN``
    are never assigned to code points.
    """

    NONE = "None"
    CR = "CR"
    LF = "LF"
    CONTROL = "Control"
    EXTEND = "Extend"
    ZWJ = "ZWJ"
    REGIONAL_INDICATOR = "Regional_Indicator"
    PREPEND = "Prepend"
    SPACING_MARK = "SpacingMark"
    L = "L"
    V = "V"
    T = "T"
    LV = "LV"
    LVT = "LVT"
    E_BASE = "E_Base"
    E_MODIFIER = "E_Modifier"
    GLUE_AFTER_ZWJ = "Glue_After_Zwj"
    E_BASE_GAZ = "E_Base_GAZ"

    # Sentinels
    END_OF_TEXT = "EndOfText"
    UNKNOWN = "Unknown"

    @classmethod
    def from_property(cls, name: str) -> "Category":
        """Map a UCD property value name to a category.

        Raises ``KeyError`` for sentinels and names this rule set does not know.
        """
        member = cls._value2member_map_.get(name)
        if member is None or member in NON_PROPERTY:
            raise KeyError(name)
        return member  # type: ignore[return-value]


NON_PROPERTY = frozenset({Category.NONE, Category.END_OF_TEXT, Category.UNKNOWN})

PROPERTY_NAMES = tuple(c.value for c in Category if c not in NON_PROPERTY)
