"""
Grapheme_Cluster_Break range table.

Sorted, non-overlapping half-open ranges ``(begin, end, category)`` covering
every Grapheme_Cluster_Break assignment of UCD 10.0.0, including unassigned
default-ignorable code points (Control) and surrogates (Control). Code points
outside every range have no special category. The precomposed Hangul
syllables are not listed literally; they follow the conjoining-jamo arithmetic
(every 28th syllable from U+AC00 is LV, the rest LVT) and are expanded once at
import time.

A complete table for another UCD release can be rendered with
``graphseg ucd gen-table GraphemeBreakProperty.txt``.
"""

from typing import Iterator, Tuple

from .categories import Category

UCD_VERSION = "10.0.0"

Range = Tuple[int, int, Category]

HANGUL_SYLLABLE_BASE = 0xAC00
HANGUL_SYLLABLE_COUNT = 11172
HANGUL_T_COUNT = 28

_LISTED: Tuple[Range, ...] = (
    (0x0000, 0x000A, Category.CONTROL),
    (0x000A, 0x000B, Category.LF),
    (0x000B, 0x000D, Category.CONTROL),
    (0x000D, 0x000E, Category.CR),
    (0x000E, 0x0020, Category.CONTROL),
    (0x007F, 0x00A0, Category.CONTROL),
    (0x00AD, 0x00AE, Category.CONTROL),
    (0x0300, 0x0370, Category.EXTEND),
    (0x0483, 0x048A, Category.EXTEND),
    (0x0591, 0x05BE, Category.EXTEND),
    (0x05BF, 0x05C0, Category.EXTEND),
    (0x05C1, 0x05C3, Category.EXTEND),
    (0x05C4, 0x05C6, Category.EXTEND),
    (0x05C7, 0x05C8, Category.EXTEND),
    (0x0600, 0x0606, Category.PREPEND),
    (0x0610, 0x061B, Category.EXTEND),
    (0x061C, 0x061D, Category.CONTROL),
    (0x064B, 0x0660, Category.EXTEND),
    (0x0670, 0x0671, Category.EXTEND),
    (0x06D6, 0x06DD, Category.EXTEND),
    (0x06DD, 0x06DE, Category.PREPEND),
    (0x06DF, 0x06E5, Category.EXTEND),
    (0x06E7, 0x06E9, Category.EXTEND),
    (0x06EA, 0x06EE, Category.EXTEND),
    (0x070F, 0x0710, Category.PREPEND),
    (0x0711, 0x0712, Category.EXTEND),
    (0x0730, 0x074B, Category.EXTEND),
    (0x07A6, 0x07B1, Category.EXTEND),
    (0x07EB, 0x07F4, Category.EXTEND),
    (0x0816, 0x081A, Category.EXTEND),
    (0x081B, 0x0824, Category.EXTEND),
    (0x0825, 0x0828, Category.EXTEND),
    (0x0829, 0x082E, Category.EXTEND),
    (0x0859, 0x085C, Category.EXTEND),
    (0x08D4, 0x08E2, Category.EXTEND),
    (0x08E2, 0x08E3, Category.PREPEND),
    (0x08E3, 0x0903, Category.EXTEND),
    (0x0903, 0x0904, Category.SPACING_MARK),
    (0x093A, 0x093B, Category.EXTEND),
    (0x093B, 0x093C, Category.SPACING_MARK),
    (0x093C, 0x093D, Category.EXTEND),
    (0x093E, 0x0941, Category.SPACING_MARK),
    (0x0941, 0x0949, Category.EXTEND),
    (0x0949, 0x094D, Category.SPACING_MARK),
    (0x094D, 0x094E, Category.EXTEND),
    (0x094E, 0x0950, Category.SPACING_MARK),
    (0x0951, 0x0958, Category.EXTEND),
    (0x0962, 0x0964, Category.EXTEND),
    (0x0981, 0x0982, Category.EXTEND),
    (0x0982, 0x0984, Category.SPACING_MARK),
    (0x09BC, 0x09BD, Category.EXTEND),
    (0x09BE, 0x09BF, Category.EXTEND),
    (0x09BF, 0x09C1, Category.SPACING_MARK),
    (0x09C1, 0x09C5, Category.EXTEND),
    (0x09C7, 0x09C9, Category.SPACING_MARK),
    (0x09CB, 0x09CD, Category.SPACING_MARK),
    (0x09CD, 0x09CE, Category.EXTEND),
    (0x09D7, 0x09D8, Category.EXTEND),
    (0x09E2, 0x09E4, Category.EXTEND),
    (0x0A01, 0x0A03, Category.EXTEND),
    (0x0A03, 0x0A04, Category.SPACING_MARK),
    (0x0A3C, 0x0A3D, Category.EXTEND),
    (0x0A3E, 0x0A41, Category.SPACING_MARK),
    (0x0A41, 0x0A43, Category.EXTEND),
    (0x0A47, 0x0A49, Category.EXTEND),
    (0x0A4B, 0x0A4E, Category.EXTEND),
    (0x0A51, 0x0A52, Category.EXTEND),
    (0x0A70, 0x0A72, Category.EXTEND),
    (0x0A75, 0x0A76, Category.EXTEND),
    (0x0A81, 0x0A83, Category.EXTEND),
    (0x0A83, 0x0A84, Category.SPACING_MARK),
    (0x0ABC, 0x0ABD, Category.EXTEND),
    (0x0ABE, 0x0AC1, Category.SPACING_MARK),
    (0x0AC1, 0x0AC6, Category.EXTEND),
    (0x0AC7, 0x0AC9, Category.EXTEND),
    (0x0AC9, 0x0ACA, Category.SPACING_MARK),
    (0x0ACB, 0x0ACD, Category.SPACING_MARK),
    (0x0ACD, 0x0ACE, Category.EXTEND),
    (0x0AE2, 0x0AE4, Category.EXTEND),
    (0x0AFA, 0x0B00, Category.EXTEND),
    (0x0B01, 0x0B02, Category.EXTEND),
    (0x0B02, 0x0B04, Category.SPACING_MARK),
    (0x0B3C, 0x0B3D, Category.EXTEND),
    (0x0B3E, 0x0B40, Category.EXTEND),
    (0x0B40, 0x0B41, Category.SPACING_MARK),
    (0x0B41, 0x0B45, Category.EXTEND),
    (0x0B47, 0x0B49, Category.SPACING_MARK),
    (0x0B4B, 0x0B4D, Category.SPACING_MARK),
    (0x0B4D, 0x0B4E, Category.EXTEND),
    (0x0B56, 0x0B58, Category.EXTEND),
    (0x0B62, 0x0B64, Category.EXTEND),
    (0x0B82, 0x0B83, Category.EXTEND),
    (0x0BBE, 0x0BBF, Category.EXTEND),
    (0x0BBF, 0x0BC0, Category.SPACING_MARK),
    (0x0BC0, 0x0BC1, Category.EXTEND),
    (0x0BC1, 0x0BC3, Category.SPACING_MARK),
    (0x0BC6, 0x0BC9, Category.SPACING_MARK),
    (0x0BCA, 0x0BCD, Category.SPACING_MARK),
    (0x0BCD, 0x0BCE, Category.EXTEND),
    (0x0BD7, 0x0BD8, Category.EXTEND),
    (0x0C00, 0x0C01, Category.EXTEND),
    (0x0C01, 0x0C04, Category.SPACING_MARK),
    (0x0C3E, 0x0C41, Category.EXTEND),
    (0x0C41, 0x0C45, Category.SPACING_MARK),
    (0x0C46, 0x0C49, Category.EXTEND),
    (0x0C4A, 0x0C4E, Category.EXTEND),
    (0x0C55, 0x0C57, Category.EXTEND),
    (0x0C62, 0x0C64, Category.EXTEND),
    (0x0C81, 0x0C82, Category.EXTEND),
    (0x0C82, 0x0C84, Category.SPACING_MARK),
    (0x0CBC, 0x0CBD, Category.EXTEND),
    (0x0CBE, 0x0CBF, Category.SPACING_MARK),
    (0x0CBF, 0x0CC0, Category.EXTEND),
    (0x0CC0, 0x0CC2, Category.SPACING_MARK),
    (0x0CC2, 0x0CC3, Category.EXTEND),
    (0x0CC3, 0x0CC5, Category.SPACING_MARK),
    (0x0CC6, 0x0CC7, Category.EXTEND),
    (0x0CC7, 0x0CC9, Category.SPACING_MARK),
    (0x0CCA, 0x0CCC, Category.SPACING_MARK),
    (0x0CCC, 0x0CCE, Category.EXTEND),
    (0x0CD5, 0x0CD7, Category.EXTEND),
    (0x0CE2, 0x0CE4, Category.EXTEND),
    (0x0D00, 0x0D02, Category.EXTEND),
    (0x0D02, 0x0D04, Category.SPACING_MARK),
    (0x0D3B, 0x0D3D, Category.EXTEND),
    (0x0D3E, 0x0D3F, Category.EXTEND),
    (0x0D3F, 0x0D41, Category.SPACING_MARK),
    (0x0D41, 0x0D45, Category.EXTEND),
    (0x0D46, 0x0D49, Category.SPACING_MARK),
    (0x0D4A, 0x0D4D, Category.SPACING_MARK),
    (0x0D4D, 0x0D4E, Category.EXTEND),
    (0x0D4E, 0x0D4F, Category.PREPEND),
    (0x0D57, 0x0D58, Category.EXTEND),
    (0x0D62, 0x0D64, Category.EXTEND),
    (0x0D82, 0x0D84, Category.SPACING_MARK),
    (0x0DCA, 0x0DCB, Category.EXTEND),
    (0x0DCF, 0x0DD0, Category.EXTEND),
    (0x0DD0, 0x0DD2, Category.SPACING_MARK),
    (0x0DD2, 0x0DD5, Category.EXTEND),
    (0x0DD6, 0x0DD7, Category.EXTEND),
    (0x0DD8, 0x0DDF, Category.SPACING_MARK),
    (0x0DDF, 0x0DE0, Category.EXTEND),
    (0x0DF2, 0x0DF4, Category.SPACING_MARK),
    (0x0E31, 0x0E32, Category.EXTEND),
    (0x0E33, 0x0E34, Category.SPACING_MARK),
    (0x0E34, 0x0E3B, Category.EXTEND),
    (0x0E47, 0x0E4F, Category.EXTEND),
    (0x0EB1, 0x0EB2, Category.EXTEND),
    (0x0EB3, 0x0EB4, Category.SPACING_MARK),
    (0x0EB4, 0x0EBA, Category.EXTEND),
    (0x0EBB, 0x0EBD, Category.EXTEND),
    (0x0EC8, 0x0ECE, Category.EXTEND),
    (0x0F18, 0x0F1A, Category.EXTEND),
    (0x0F35, 0x0F36, Category.EXTEND),
    (0x0F37, 0x0F38, Category.EXTEND),
    (0x0F39, 0x0F3A, Category.EXTEND),
    (0x0F3E, 0x0F40, Category.SPACING_MARK),
    (0x0F71, 0x0F7F, Category.EXTEND),
    (0x0F7F, 0x0F80, Category.SPACING_MARK),
    (0x0F80, 0x0F85, Category.EXTEND),
    (0x0F86, 0x0F88, Category.EXTEND),
    (0x0F8D, 0x0F98, Category.EXTEND),
    (0x0F99, 0x0FBD, Category.EXTEND),
    (0x0FC6, 0x0FC7, Category.EXTEND),
    (0x102D, 0x1031, Category.EXTEND),
    (0x1031, 0x1032, Category.SPACING_MARK),
    (0x1032, 0x1038, Category.EXTEND),
    (0x1039, 0x103B, Category.EXTEND),
    (0x103B, 0x103D, Category.SPACING_MARK),
    (0x103D, 0x103F, Category.EXTEND),
    (0x1056, 0x1058, Category.SPACING_MARK),
    (0x1058, 0x105A, Category.EXTEND),
    (0x105E, 0x1061, Category.EXTEND),
    (0x1071, 0x1075, Category.EXTEND),
    (0x1082, 0x1083, Category.EXTEND),
    (0x1084, 0x1085, Category.SPACING_MARK),
    (0x1085, 0x1087, Category.EXTEND),
    (0x108D, 0x108E, Category.EXTEND),
    (0x109D, 0x109E, Category.EXTEND),
    (0x1100, 0x1160, Category.L),
    (0x1160, 0x11A8, Category.V),
    (0x11A8, 0x1200, Category.T),
    (0x135D, 0x1360, Category.EXTEND),
    (0x1712, 0x1715, Category.EXTEND),
    (0x1732, 0x1735, Category.EXTEND),
    (0x1752, 0x1754, Category.EXTEND),
    (0x1772, 0x1774, Category.EXTEND),
    (0x17B4, 0x17B6, Category.EXTEND),
    (0x17B6, 0x17B7, Category.SPACING_MARK),
    (0x17B7, 0x17BE, Category.EXTEND),
    (0x17BE, 0x17C6, Category.SPACING_MARK),
    (0x17C6, 0x17C7, Category.EXTEND),
    (0x17C7, 0x17C9, Category.SPACING_MARK),
    (0x17C9, 0x17D4, Category.EXTEND),
    (0x17DD, 0x17DE, Category.EXTEND),
    (0x180B, 0x180E, Category.EXTEND),
    (0x180E, 0x180F, Category.CONTROL),
    (0x1885, 0x1887, Category.EXTEND),
    (0x18A9, 0x18AA, Category.EXTEND),
    (0x1920, 0x1923, Category.EXTEND),
    (0x1923, 0x1927, Category.SPACING_MARK),
    (0x1927, 0x1929, Category.EXTEND),
    (0x1929, 0x192C, Category.SPACING_MARK),
    (0x1930, 0x1932, Category.SPACING_MARK),
    (0x1932, 0x1933, Category.EXTEND),
    (0x1933, 0x1939, Category.SPACING_MARK),
    (0x1939, 0x193C, Category.EXTEND),
    (0x1A17, 0x1A19, Category.EXTEND),
    (0x1A19, 0x1A1B, Category.SPACING_MARK),
    (0x1A1B, 0x1A1C, Category.EXTEND),
    (0x1A55, 0x1A56, Category.SPACING_MARK),
    (0x1A56, 0x1A57, Category.EXTEND),
    (0x1A57, 0x1A58, Category.SPACING_MARK),
    (0x1A58, 0x1A5F, Category.EXTEND),
    (0x1A60, 0x1A61, Category.EXTEND),
    (0x1A62, 0x1A63, Category.EXTEND),
    (0x1A65, 0x1A6D, Category.EXTEND),
    (0x1A6D, 0x1A73, Category.SPACING_MARK),
    (0x1A73, 0x1A7D, Category.EXTEND),
    (0x1A7F, 0x1A80, Category.EXTEND),
    (0x1AB0, 0x1ABF, Category.EXTEND),
    (0x1B00, 0x1B04, Category.EXTEND),
    (0x1B04, 0x1B05, Category.SPACING_MARK),
    (0x1B34, 0x1B35, Category.EXTEND),
    (0x1B35, 0x1B36, Category.SPACING_MARK),
    (0x1B36, 0x1B3B, Category.EXTEND),
    (0x1B3B, 0x1B3C, Category.SPACING_MARK),
    (0x1B3C, 0x1B3D, Category.EXTEND),
    (0x1B3D, 0x1B42, Category.SPACING_MARK),
    (0x1B42, 0x1B43, Category.EXTEND),
    (0x1B43, 0x1B45, Category.SPACING_MARK),
    (0x1B6B, 0x1B74, Category.EXTEND),
    (0x1B80, 0x1B82, Category.EXTEND),
    (0x1B82, 0x1B83, Category.SPACING_MARK),
    (0x1BA1, 0x1BA2, Category.SPACING_MARK),
    (0x1BA2, 0x1BA6, Category.EXTEND),
    (0x1BA6, 0x1BA8, Category.SPACING_MARK),
    (0x1BA8, 0x1BAA, Category.EXTEND),
    (0x1BAA, 0x1BAB, Category.SPACING_MARK),
    (0x1BAB, 0x1BAE, Category.EXTEND),
    (0x1BE6, 0x1BE7, Category.EXTEND),
    (0x1BE7, 0x1BE8, Category.SPACING_MARK),
    (0x1BE8, 0x1BEA, Category.EXTEND),
    (0x1BEA, 0x1BED, Category.SPACING_MARK),
    (0x1BED, 0x1BEE, Category.EXTEND),
    (0x1BEE, 0x1BEF, Category.SPACING_MARK),
    (0x1BEF, 0x1BF2, Category.EXTEND),
    (0x1BF2, 0x1BF4, Category.SPACING_MARK),
    (0x1C24, 0x1C2C, Category.SPACING_MARK),
    (0x1C2C, 0x1C34, Category.EXTEND),
    (0x1C34, 0x1C36, Category.SPACING_MARK),
    (0x1C36, 0x1C38, Category.EXTEND),
    (0x1CD0, 0x1CD3, Category.EXTEND),
    (0x1CD4, 0x1CE1, Category.EXTEND),
    (0x1CE1, 0x1CE2, Category.SPACING_MARK),
    (0x1CE2, 0x1CE9, Category.EXTEND),
    (0x1CED, 0x1CEE, Category.EXTEND),
    (0x1CF2, 0x1CF4, Category.SPACING_MARK),
    (0x1CF4, 0x1CF5, Category.EXTEND),
    (0x1CF7, 0x1CF8, Category.SPACING_MARK),
    (0x1CF8, 0x1CFA, Category.EXTEND),
    (0x1DC0, 0x1DFA, Category.EXTEND),
    (0x1DFB, 0x1E00, Category.EXTEND),
    (0x200B, 0x200C, Category.CONTROL),
    (0x200C, 0x200D, Category.EXTEND),
    (0x200D, 0x200E, Category.ZWJ),
    (0x200E, 0x2010, Category.CONTROL),
    (0x2028, 0x202F, Category.CONTROL),
    (0x2060, 0x2070, Category.CONTROL),
    (0x20D0, 0x20F1, Category.EXTEND),
    (0x261D, 0x261E, Category.E_BASE),
    (0x2640, 0x2641, Category.GLUE_AFTER_ZWJ),
    (0x2642, 0x2643, Category.GLUE_AFTER_ZWJ),
    (0x2695, 0x2697, Category.GLUE_AFTER_ZWJ),
    (0x26F9, 0x26FA, Category.E_BASE),
    (0x2708, 0x2709, Category.GLUE_AFTER_ZWJ),
    (0x270A, 0x270E, Category.E_BASE),
    (0x2764, 0x2765, Category.GLUE_AFTER_ZWJ),
    (0x2CEF, 0x2CF2, Category.EXTEND),
    (0x2D7F, 0x2D80, Category.EXTEND),
    (0x2DE0, 0x2E00, Category.EXTEND),
    (0x302A, 0x3030, Category.EXTEND),
    (0x3099, 0x309B, Category.EXTEND),
    (0xA66F, 0xA673, Category.EXTEND),
    (0xA674, 0xA67E, Category.EXTEND),
    (0xA69E, 0xA6A0, Category.EXTEND),
    (0xA6F0, 0xA6F2, Category.EXTEND),
    (0xA802, 0xA803, Category.EXTEND),
    (0xA806, 0xA807, Category.EXTEND),
    (0xA80B, 0xA80C, Category.EXTEND),
    (0xA823, 0xA825, Category.SPACING_MARK),
    (0xA825, 0xA827, Category.EXTEND),
    (0xA827, 0xA828, Category.SPACING_MARK),
    (0xA880, 0xA882, Category.SPACING_MARK),
    (0xA8B4, 0xA8C4, Category.SPACING_MARK),
    (0xA8C4, 0xA8C6, Category.EXTEND),
    (0xA8E0, 0xA8F2, Category.EXTEND),
    (0xA926, 0xA92E, Category.EXTEND),
    (0xA947, 0xA952, Category.EXTEND),
    (0xA952, 0xA954, Category.SPACING_MARK),
    (0xA960, 0xA97D, Category.L),
    (0xA980, 0xA983, Category.EXTEND),
    (0xA983, 0xA984, Category.SPACING_MARK),
    (0xA9B3, 0xA9B4, Category.EXTEND),
    (0xA9B4, 0xA9B6, Category.SPACING_MARK),
    (0xA9B6, 0xA9BA, Category.EXTEND),
    (0xA9BA, 0xA9BC, Category.SPACING_MARK),
    (0xA9BC, 0xA9BD, Category.EXTEND),
    (0xA9BD, 0xA9C1, Category.SPACING_MARK),
    (0xA9E5, 0xA9E6, Category.EXTEND),
    (0xAA29, 0xAA2F, Category.EXTEND),
    (0xAA2F, 0xAA31, Category.SPACING_MARK),
    (0xAA31, 0xAA33, Category.EXTEND),
    (0xAA33, 0xAA35, Category.SPACING_MARK),
    (0xAA35, 0xAA37, Category.EXTEND),
    (0xAA43, 0xAA44, Category.EXTEND),
    (0xAA4C, 0xAA4D, Category.EXTEND),
    (0xAA4D, 0xAA4E, Category.SPACING_MARK),
    (0xAA7C, 0xAA7D, Category.EXTEND),
    (0xAAB0, 0xAAB1, Category.EXTEND),
    (0xAAB2, 0xAAB5, Category.EXTEND),
    (0xAAB7, 0xAAB9, Category.EXTEND),
    (0xAABE, 0xAAC0, Category.EXTEND),
    (0xAAC1, 0xAAC2, Category.EXTEND),
    (0xAAEB, 0xAAEC, Category.SPACING_MARK),
    (0xAAEC, 0xAAEE, Category.EXTEND),
    (0xAAEE, 0xAAF0, Category.SPACING_MARK),
    (0xAAF5, 0xAAF6, Category.SPACING_MARK),
    (0xAAF6, 0xAAF7, Category.EXTEND),
    (0xABE3, 0xABE5, Category.SPACING_MARK),
    (0xABE5, 0xABE6, Category.EXTEND),
    (0xABE6, 0xABE8, Category.SPACING_MARK),
    (0xABE8, 0xABE9, Category.EXTEND),
    (0xABE9, 0xABEB, Category.SPACING_MARK),
    (0xABEC, 0xABED, Category.SPACING_MARK),
    (0xABED, 0xABEE, Category.EXTEND),
    (0xD7B0, 0xD7C7, Category.V),
    (0xD7CB, 0xD7FC, Category.T),
    (0xD800, 0xE000, Category.CONTROL),
    (0xFB1E, 0xFB1F, Category.EXTEND),
    (0xFE00, 0xFE10, Category.EXTEND),
    (0xFE20, 0xFE30, Category.EXTEND),
    (0xFEFF, 0xFF00, Category.CONTROL),
    (0xFF9E, 0xFFA0, Category.EXTEND),
    (0xFFF0, 0xFFFC, Category.CONTROL),
    (0x101FD, 0x101FE, Category.EXTEND),
    (0x102E0, 0x102E1, Category.EXTEND),
    (0x10376, 0x1037B, Category.EXTEND),
    (0x10A01, 0x10A04, Category.EXTEND),
    (0x10A05, 0x10A07, Category.EXTEND),
    (0x10A0C, 0x10A10, Category.EXTEND),
    (0x10A38, 0x10A3B, Category.EXTEND),
    (0x10A3F, 0x10A40, Category.EXTEND),
    (0x10AE5, 0x10AE7, Category.EXTEND),
    (0x11000, 0x11001, Category.SPACING_MARK),
    (0x11001, 0x11002, Category.EXTEND),
    (0x11002, 0x11003, Category.SPACING_MARK),
    (0x11038, 0x11047, Category.EXTEND),
    (0x1107F, 0x11082, Category.EXTEND),
    (0x11082, 0x11083, Category.SPACING_MARK),
    (0x110B0, 0x110B3, Category.SPACING_MARK),
    (0x110B3, 0x110B7, Category.EXTEND),
    (0x110B7, 0x110B9, Category.SPACING_MARK),
    (0x110B9, 0x110BB, Category.EXTEND),
    (0x110BD, 0x110BE, Category.PREPEND),
    (0x11100, 0x11103, Category.EXTEND),
    (0x11127, 0x1112C, Category.EXTEND),
    (0x1112C, 0x1112D, Category.SPACING_MARK),
    (0x1112D, 0x11135, Category.EXTEND),
    (0x11173, 0x11174, Category.EXTEND),
    (0x11180, 0x11182, Category.EXTEND),
    (0x11182, 0x11183, Category.SPACING_MARK),
    (0x111B3, 0x111B6, Category.SPACING_MARK),
    (0x111B6, 0x111BF, Category.EXTEND),
    (0x111BF, 0x111C1, Category.SPACING_MARK),
    (0x111C2, 0x111C4, Category.PREPEND),
    (0x111C9, 0x111CD, Category.EXTEND),
    (0x1122C, 0x1122F, Category.SPACING_MARK),
    (0x1122F, 0x11232, Category.EXTEND),
    (0x11232, 0x11234, Category.SPACING_MARK),
    (0x11234, 0x11235, Category.EXTEND),
    (0x11235, 0x11236, Category.SPACING_MARK),
    (0x11236, 0x11238, Category.EXTEND),
    (0x1123E, 0x1123F, Category.EXTEND),
    (0x112DF, 0x112E0, Category.EXTEND),
    (0x112E0, 0x112E3, Category.SPACING_MARK),
    (0x112E3, 0x112EB, Category.EXTEND),
    (0x11300, 0x11302, Category.EXTEND),
    (0x11302, 0x11304, Category.SPACING_MARK),
    (0x1133C, 0x1133D, Category.EXTEND),
    (0x1133E, 0x1133F, Category.EXTEND),
    (0x1133F, 0x11340, Category.SPACING_MARK),
    (0x11340, 0x11341, Category.EXTEND),
    (0x11341, 0x11345, Category.SPACING_MARK),
    (0x11347, 0x11349, Category.SPACING_MARK),
    (0x1134B, 0x1134E, Category.SPACING_MARK),
    (0x11357, 0x11358, Category.EXTEND),
    (0x11362, 0x11364, Category.SPACING_MARK),
    (0x11366, 0x1136D, Category.EXTEND),
    (0x11370, 0x11375, Category.EXTEND),
    (0x11435, 0x11438, Category.SPACING_MARK),
    (0x11438, 0x11440, Category.EXTEND),
    (0x11440, 0x11442, Category.SPACING_MARK),
    (0x11442, 0x11445, Category.EXTEND),
    (0x11445, 0x11446, Category.SPACING_MARK),
    (0x11446, 0x11447, Category.EXTEND),
    (0x114B0, 0x114B1, Category.EXTEND),
    (0x114B1, 0x114B3, Category.SPACING_MARK),
    (0x114B3, 0x114B9, Category.EXTEND),
    (0x114B9, 0x114BA, Category.SPACING_MARK),
    (0x114BA, 0x114BB, Category.EXTEND),
    (0x114BB, 0x114BD, Category.SPACING_MARK),
    (0x114BD, 0x114BE, Category.EXTEND),
    (0x114BE, 0x114BF, Category.SPACING_MARK),
    (0x114BF, 0x114C1, Category.EXTEND),
    (0x114C1, 0x114C2, Category.SPACING_MARK),
    (0x114C2, 0x114C4, Category.EXTEND),
    (0x115AF, 0x115B0, Category.EXTEND),
    (0x115B0, 0x115B2, Category.SPACING_MARK),
    (0x115B2, 0x115B6, Category.EXTEND),
    (0x115B8, 0x115BC, Category.SPACING_MARK),
    (0x115BC, 0x115BE, Category.EXTEND),
    (0x115BE, 0x115BF, Category.SPACING_MARK),
    (0x115BF, 0x115C1, Category.EXTEND),
    (0x115DC, 0x115DE, Category.EXTEND),
    (0x11630, 0x11633, Category.SPACING_MARK),
    (0x11633, 0x1163B, Category.EXTEND),
    (0x1163B, 0x1163D, Category.SPACING_MARK),
    (0x1163D, 0x1163E, Category.EXTEND),
    (0x1163E, 0x1163F, Category.SPACING_MARK),
    (0x1163F, 0x11641, Category.EXTEND),
    (0x116AB, 0x116AC, Category.EXTEND),
    (0x116AC, 0x116AD, Category.SPACING_MARK),
    (0x116AD, 0x116AE, Category.EXTEND),
    (0x116AE, 0x116B0, Category.SPACING_MARK),
    (0x116B0, 0x116B6, Category.EXTEND),
    (0x116B6, 0x116B7, Category.SPACING_MARK),
    (0x116B7, 0x116B8, Category.EXTEND),
    (0x1171D, 0x11720, Category.EXTEND),
    (0x11722, 0x11726, Category.EXTEND),
    (0x11726, 0x11727, Category.SPACING_MARK),
    (0x11727, 0x1172C, Category.EXTEND),
    (0x11A01, 0x11A0B, Category.EXTEND),
    (0x11A33, 0x11A39, Category.EXTEND),
    (0x11A39, 0x11A3A, Category.SPACING_MARK),
    (0x11A3A, 0x11A3B, Category.PREPEND),
    (0x11A3B, 0x11A3F, Category.EXTEND),
    (0x11A47, 0x11A48, Category.EXTEND),
    (0x11A51, 0x11A57, Category.EXTEND),
    (0x11A57, 0x11A59, Category.SPACING_MARK),
    (0x11A59, 0x11A5C, Category.EXTEND),
    (0x11A86, 0x11A8A, Category.PREPEND),
    (0x11A8A, 0x11A97, Category.EXTEND),
    (0x11A97, 0x11A98, Category.SPACING_MARK),
    (0x11A98, 0x11A9A, Category.EXTEND),
    (0x11C2F, 0x11C30, Category.SPACING_MARK),
    (0x11C30, 0x11C37, Category.EXTEND),
    (0x11C38, 0x11C3E, Category.EXTEND),
    (0x11C3E, 0x11C3F, Category.SPACING_MARK),
    (0x11C3F, 0x11C40, Category.EXTEND),
    (0x11C92, 0x11CA8, Category.EXTEND),
    (0x11CA9, 0x11CAA, Category.SPACING_MARK),
    (0x11CAA, 0x11CB1, Category.EXTEND),
    (0x11CB1, 0x11CB2, Category.SPACING_MARK),
    (0x11CB2, 0x11CB4, Category.EXTEND),
    (0x11CB4, 0x11CB5, Category.SPACING_MARK),
    (0x11CB5, 0x11CB7, Category.EXTEND),
    (0x11D31, 0x11D37, Category.EXTEND),
    (0x11D3A, 0x11D3B, Category.EXTEND),
    (0x11D3C, 0x11D3E, Category.EXTEND),
    (0x11D3F, 0x11D46, Category.EXTEND),
    (0x11D46, 0x11D47, Category.PREPEND),
    (0x11D47, 0x11D48, Category.EXTEND),
    (0x16AF0, 0x16AF5, Category.EXTEND),
    (0x16B30, 0x16B37, Category.EXTEND),
    (0x16F51, 0x16F7F, Category.SPACING_MARK),
    (0x16F8F, 0x16F93, Category.EXTEND),
    (0x1BC9D, 0x1BC9F, Category.EXTEND),
    (0x1BCA0, 0x1BCA4, Category.CONTROL),
    (0x1D165, 0x1D166, Category.EXTEND),
    (0x1D166, 0x1D167, Category.SPACING_MARK),
    (0x1D167, 0x1D16A, Category.EXTEND),
    (0x1D16D, 0x1D16E, Category.SPACING_MARK),
    (0x1D16E, 0x1D173, Category.EXTEND),
    (0x1D173, 0x1D17B, Category.CONTROL),
    (0x1D17B, 0x1D183, Category.EXTEND),
    (0x1D185, 0x1D18C, Category.EXTEND),
    (0x1D1AA, 0x1D1AE, Category.EXTEND),
    (0x1D242, 0x1D245, Category.EXTEND),
    (0x1DA00, 0x1DA37, Category.EXTEND),
    (0x1DA3B, 0x1DA6D, Category.EXTEND),
    (0x1DA75, 0x1DA76, Category.EXTEND),
    (0x1DA84, 0x1DA85, Category.EXTEND),
    (0x1DA9B, 0x1DAA0, Category.EXTEND),
    (0x1DAA1, 0x1DAB0, Category.EXTEND),
    (0x1E000, 0x1E007, Category.EXTEND),
    (0x1E008, 0x1E019, Category.EXTEND),
    (0x1E01B, 0x1E022, Category.EXTEND),
    (0x1E023, 0x1E025, Category.EXTEND),
    (0x1E026, 0x1E02B, Category.EXTEND),
    (0x1E8D0, 0x1E8D7, Category.EXTEND),
    (0x1E944, 0x1E94B, Category.EXTEND),
    (0x1F1E6, 0x1F200, Category.REGIONAL_INDICATOR),
    (0x1F308, 0x1F309, Category.GLUE_AFTER_ZWJ),
    (0x1F33E, 0x1F33F, Category.GLUE_AFTER_ZWJ),
    (0x1F373, 0x1F374, Category.GLUE_AFTER_ZWJ),
    (0x1F385, 0x1F386, Category.E_BASE),
    (0x1F393, 0x1F394, Category.GLUE_AFTER_ZWJ),
    (0x1F3A4, 0x1F3A5, Category.GLUE_AFTER_ZWJ),
    (0x1F3A8, 0x1F3A9, Category.GLUE_AFTER_ZWJ),
    (0x1F3C2, 0x1F3C5, Category.E_BASE),
    (0x1F3C7, 0x1F3C8, Category.E_BASE),
    (0x1F3CA, 0x1F3CD, Category.E_BASE),
    (0x1F3EB, 0x1F3EC, Category.GLUE_AFTER_ZWJ),
    (0x1F3ED, 0x1F3EE, Category.GLUE_AFTER_ZWJ),
    (0x1F3FB, 0x1F400, Category.E_MODIFIER),
    (0x1F442, 0x1F444, Category.E_BASE),
    (0x1F446, 0x1F451, Category.E_BASE),
    (0x1F466, 0x1F46A, Category.E_BASE_GAZ),
    (0x1F46E, 0x1F46F, Category.E_BASE),
    (0x1F470, 0x1F479, Category.E_BASE),
    (0x1F47C, 0x1F47D, Category.E_BASE),
    (0x1F481, 0x1F484, Category.E_BASE),
    (0x1F485, 0x1F488, Category.E_BASE),
    (0x1F48B, 0x1F48C, Category.GLUE_AFTER_ZWJ),
    (0x1F4AA, 0x1F4AB, Category.E_BASE),
    (0x1F4BB, 0x1F4BD, Category.GLUE_AFTER_ZWJ),
    (0x1F527, 0x1F528, Category.GLUE_AFTER_ZWJ),
    (0x1F52C, 0x1F52D, Category.GLUE_AFTER_ZWJ),
    (0x1F574, 0x1F576, Category.E_BASE),
    (0x1F57A, 0x1F57B, Category.E_BASE),
    (0x1F590, 0x1F591, Category.E_BASE),
    (0x1F595, 0x1F597, Category.E_BASE),
    (0x1F5E8, 0x1F5E9, Category.GLUE_AFTER_ZWJ),
    (0x1F645, 0x1F648, Category.E_BASE),
    (0x1F64B, 0x1F650, Category.E_BASE),
    (0x1F680, 0x1F681, Category.GLUE_AFTER_ZWJ),
    (0x1F692, 0x1F693, Category.GLUE_AFTER_ZWJ),
    (0x1F6A3, 0x1F6A4, Category.E_BASE),
    (0x1F6B4, 0x1F6B7, Category.E_BASE),
    (0x1F6C0, 0x1F6C1, Category.E_BASE),
    (0x1F6CC, 0x1F6CD, Category.E_BASE),
    (0x1F918, 0x1F91D, Category.E_BASE),
    (0x1F91E, 0x1F920, Category.E_BASE),
    (0x1F926, 0x1F927, Category.E_BASE),
    (0x1F930, 0x1F93A, Category.E_BASE),
    (0x1F93D, 0x1F93F, Category.E_BASE),
    (0x1F9D1, 0x1F9DE, Category.E_BASE),
    (0xE0000, 0xE0020, Category.CONTROL),
    (0xE0020, 0xE0080, Category.EXTEND),
    (0xE0080, 0xE0100, Category.CONTROL),
    (0xE0100, 0xE01F0, Category.EXTEND),
    (0xE01F0, 0xE1000, Category.CONTROL),
)


def _hangul_syllables() -> Iterator[Range]:
    end = HANGUL_SYLLABLE_BASE + HANGUL_SYLLABLE_COUNT
    for lv in range(HANGUL_SYLLABLE_BASE, end, HANGUL_T_COUNT):
        yield (lv, lv + 1, Category.LV)
        yield (lv + 1, lv + HANGUL_T_COUNT, Category.LVT)


RANGES: Tuple[Range, ...] = tuple(
    sorted(_LISTED + tuple(_hangul_syllables()), key=lambda r: r[0])
)
