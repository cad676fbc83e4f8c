import unittest

from clipscrub.classify import (
    CONTROL,
    FORMAT,
    PRIVATE_USE,
    SURROGATE,
    UNASSIGNED,
    category_name,
    classify,
    deletion_set,
    iter_code_points,
)
from clipscrub.config import PolicyConfig
from clipscrub.types import DELETE, KEEP, REPLACE_WITH_SPACE


class ClassifyTests(unittest.TestCase):
    def test_line_breaks_are_always_kept(self) -> None:
        for policy in (PolicyConfig(), PolicyConfig(keep_format_marks=True)):
            self.assertEqual(classify("\r", policy), KEEP)
            self.assertEqual(classify("\n", policy), KEEP)

    def test_no_break_spaces_follow_policy(self) -> None:
        for ch in ("\u00a0", "\u202f"):
            self.assertEqual(classify(ch, PolicyConfig()), REPLACE_WITH_SPACE)
            self.assertEqual(classify(ch, PolicyConfig(keep_no_break_space=True)), KEEP)

    def test_category_c_is_deleted_by_default(self) -> None:
        for ch in ("\x07", "\t", "\u200b", "\ufeff", "\ud800", "\ue000", "\uffff"):
            self.assertEqual(classify(ch, PolicyConfig()), DELETE, repr(ch))

    def test_keep_format_marks_only_spares_format(self) -> None:
        policy = PolicyConfig(keep_format_marks=True)
        self.assertEqual(classify("\u200d", policy), KEEP)
        self.assertEqual(classify("\x00", policy), DELETE)
        self.assertEqual(classify("\ue000", policy), DELETE)
        self.assertNotIn(FORMAT, deletion_set(policy))
        self.assertIn(FORMAT, deletion_set(PolicyConfig()))

    def test_printable_text_is_kept(self) -> None:
        for ch in ("a", " ", "\u00e9", "\u4e2d", "\U0001f600"):
            self.assertEqual(classify(ch, PolicyConfig()), KEEP)

    def test_category_names(self) -> None:
        self.assertEqual(category_name("\x1b"), CONTROL)
        self.assertEqual(category_name("\u2060"), FORMAT)
        self.assertEqual(category_name("\udfff"), SURROGATE)
        self.assertEqual(category_name("\U000f0000"), PRIVATE_USE)
        self.assertEqual(category_name("\uffff"), UNASSIGNED)
        self.assertIsNone(category_name("x"))

    def test_unclassifiable_input_is_kept(self) -> None:
        self.assertIsNone(category_name(""))
        self.assertEqual(classify("ab", PolicyConfig()), KEEP)


class CodePointTests(unittest.TestCase):
    def test_joins_surrogate_pairs(self) -> None:
        self.assertEqual(list(iter_code_points("a\ud83d\ude00b")), ["a", "\U0001f600", "b"])

    def test_leaves_lone_surrogates(self) -> None:
        self.assertEqual(list(iter_code_points("\ude00\ud83d")), ["\ude00", "\ud83d"])
        self.assertEqual(list(iter_code_points("x\ud83d")), ["x", "\ud83d"])

    def test_astral_characters_pass_through(self) -> None:
        self.assertEqual(list(iter_code_points("\U00020000")), ["\U00020000"])
