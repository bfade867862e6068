"""
Test cases for the malformation patterns the cascade is expected to repair.

Each test class covers one pattern end to end through the public API.
"""

import json
import time
import unittest

import jsonrescue
from jsonrescue import RecoveryStage, StageTracker


class TestStrictSuccess(unittest.TestCase):
    """Valid JSON is returned exactly as the standard decoder returns it."""

    def test_idempotence_of_strict_success(self) -> None:
        """Test that valid input decodes at the raw stage with no repair."""
        samples = [
            '{"a": 1, "b": [true, null, 2.5], "c": {"d": "e"}}',
            "[1, 2, 3]",
            '"just a string"',
            "12.5e3",
            '{"a": "it\'s ok"}',
        ]
        for text in samples:
            with self.subTest(text=text):
                tracker = StageTracker()
                result = jsonrescue.recover(text, tracker=tracker)
                self.assertEqual(result.value, json.loads(text))
                self.assertIs(result.stage, RecoveryStage.RAW_STRICT)
                self.assertFalse(tracker.repaired)


class TestCascadeMonotonicity(unittest.TestCase):
    """Disabling repairs never yields a success that enabling them would not."""

    SAMPLES = [
        '{"a": 1}',
        '{"a": 1,}',
        "{a: 1}",
        "prose {\"a\": 1} prose",
        "no json at all",
        "[1, 2,]",
        "null",
        "",
    ]

    def test_monotonicity(self) -> None:
        """Test that every strict success is also a lenient success."""
        for text in self.SAMPLES:
            with self.subTest(text=text):
                strict = jsonrescue.recover(text, attempt_fix=False)
                lenient = jsonrescue.recover(text)
                if strict.ok:
                    self.assertTrue(lenient.ok)
                    self.assertEqual(strict.value, lenient.value)


class TestTrailingCommas(unittest.TestCase):
    """Test trailing comma removal."""

    def test_object(self) -> None:
        """Test a trailing comma in an object."""
        self.assertEqual(jsonrescue.loads('{"a":1,}'), jsonrescue.loads('{"a":1}'))

    def test_array(self) -> None:
        """Test a trailing comma in an array."""
        self.assertEqual(jsonrescue.loads("[1,2,]"), jsonrescue.loads("[1,2]"))

    def test_multiline(self) -> None:
        """Test trailing commas before closers on their own lines."""
        text = """{
            "items": [
                "a",
                "b",
            ],
        }"""
        self.assertEqual(jsonrescue.loads(text), {"items": ["a", "b"]})


class TestBareKeys(unittest.TestCase):
    """Test quoting of identifier-shaped keys."""

    def test_bare_keys(self) -> None:
        """Test flat bare keys."""
        self.assertEqual(jsonrescue.loads("{a:1, b:2}"), {"a": 1, "b": 2})

    def test_nested_bare_keys(self) -> None:
        """Test bare keys at several nesting levels."""
        self.assertEqual(
            jsonrescue.loads("{outer: {inner: [1, {deep: true}]}}"),
            {"outer": {"inner": [1, {"deep": True}]}},
        )


class TestQuoteNormalization(unittest.TestCase):
    """Test single-quote conversion and apostrophe safety."""

    def test_single_quotes(self) -> None:
        """Test single-quoted keys and values."""
        self.assertEqual(jsonrescue.loads("{'a':'x'}"), {"a": "x"})

    def test_apostrophe_in_valid_string_is_not_corrupted(self) -> None:
        """Test that valid double-quoted strings keep their apostrophes."""
        self.assertEqual(jsonrescue.loads('{"a":"it\'s ok"}'), {"a": "it's ok"})

    def test_apostrophe_survives_when_repair_is_needed(self) -> None:
        """Test that the quote rewrite leaves apostrophes alone when it runs."""
        tracker = StageTracker()
        result = jsonrescue.recover('{"a":"it\'s ok", b: \'x\',}', tracker=tracker)
        self.assertEqual(result.value, {"a": "it's ok", "b": "x"})
        self.assertIs(result.stage, RecoveryStage.MISTAKE_FIXED_STRICT)

    def test_prose_apostrophe_after_colon(self) -> None:
        """Test an apostrophe right after a colon in the lead-in prose."""
        result = jsonrescue.recover("Summary: 'twas fine. {'a': 1}")
        self.assertEqual(result.value, {"a": 1})

    def test_prose_apostrophe_after_comma(self) -> None:
        """Test an apostrophe right after a comma in the lead-in prose."""
        result = jsonrescue.recover("Well, 'tis done: ['x', 'y',]")
        self.assertEqual(result.value, ["x", "y"])

    def test_mixed_quotes(self) -> None:
        """Test single and double quotes in one object."""
        self.assertEqual(
            jsonrescue.loads("{'name': \"Ada\", \"lang\": 'en'}"),
            {"name": "Ada", "lang": "en"},
        )

    def test_escaped_double_quotes_preserved(self) -> None:
        """Test that escaped quotes survive the repairs."""
        self.assertEqual(
            jsonrescue.loads(r'{"quote": "she said \"no\"",}'),
            {"quote": 'she said "no"'},
        )


class TestForeignLiterals(unittest.TestCase):
    """Test Python literal substitution."""

    def test_python_literals(self) -> None:
        """Test True and None as values."""
        self.assertEqual(
            jsonrescue.loads('{"a":True,"b":None}'), {"a": True, "b": None}
        )

    def test_false(self) -> None:
        """Test all three literals in an array."""
        self.assertEqual(jsonrescue.loads("[False, True, None]"), [False, True, None])

    def test_literal_words_inside_strings_kept(self) -> None:
        """Test that literal names inside strings are not replaced."""
        self.assertEqual(
            jsonrescue.loads('{"msg": "None left, True story", "ok": False}'),
            {"msg": "None left, True story", "ok": False},
        )


class TestComments(unittest.TestCase):
    """Test comment removal."""

    def test_block_and_line_comments(self) -> None:
        """Test a block comment inside and a line comment after the object."""
        self.assertEqual(jsonrescue.loads('{"a":1 /* note */} // trailing'), {"a": 1})

    def test_comment_markers_in_strings_kept(self) -> None:
        """Test that a URL inside a string is not cut at ``//``."""
        self.assertEqual(
            jsonrescue.loads('{"url": "https://example.com/x", "n": 1,}'),
            {"url": "https://example.com/x", "n": 1},
        )

    def test_hash_comments_via_aggressive_pass(self) -> None:
        """Test that ``#`` comments are stripped by the last stage."""
        result = jsonrescue.recover('{"a": 1, # one\n"b": 2 # two\n}')
        self.assertEqual(result.value, {"a": 1, "b": 2})
        self.assertIs(result.stage, RecoveryStage.AGGRESSIVE_STRICT)


class TestBlockExtraction(unittest.TestCase):
    """Test recovery of blocks embedded in prose."""

    def test_block_in_prose(self) -> None:
        """Test an object between prose."""
        result = jsonrescue.recover('Here is the result: {"a":1} thanks')
        self.assertEqual(result.value, {"a": 1})
        self.assertIs(result.stage, RecoveryStage.BLOCK_CANDIDATES)

    def test_first_found_block_wins(self) -> None:
        """Test that the earliest valid block is returned."""
        result = jsonrescue.recover('first {"a": 1} then {"b": 2}')
        self.assertEqual(result.value, {"a": 1})

    def test_invalid_first_block_falls_through_to_next(self) -> None:
        """Test that a bad candidate moves on to the next one."""
        tracker = StageTracker()
        result = jsonrescue.recover(
            'draft {"a": ???} final {"a": 2}', tracker=tracker
        )
        self.assertEqual(result.value, {"a": 2})
        self.assertEqual(tracker.attempts[-1].candidate_index, 1)

    def test_objects_tried_before_arrays(self) -> None:
        """Test that an object wins over an earlier array."""
        result = jsonrescue.recover('ids [1, 2] and record {"id": 1}')
        self.assertEqual(result.value, {"id": 1})

    def test_array_in_prose(self) -> None:
        """Test an array between prose."""
        self.assertEqual(jsonrescue.loads("Numbers: [1, 2, 3,] done"), [1, 2, 3])

    def test_deep_and_mixed_nesting(self) -> None:
        """Test a deeply nested block with both bracket types."""
        text = 'Result: {"a": {"b": {"c": [1, {"d": [2, [3]]}]}}} end'
        self.assertEqual(
            jsonrescue.loads(text), {"a": {"b": {"c": [1, {"d": [2, [3]]}]}}}
        )

    def test_brackets_inside_strings(self) -> None:
        """Test that brackets inside strings do not end the block."""
        text = 'Answer: {"text": "use } and ] carefully", "n": 1} ok'
        self.assertEqual(
            jsonrescue.loads(text), {"text": "use } and ] carefully", "n": 1}
        )

    def test_block_repaired_individually(self) -> None:
        """Test that a block is mistake-fixed before decoding."""
        self.assertEqual(
            jsonrescue.loads("Sure! Here you go:\n{name: 'Ada', admin: False,}\nBye"),
            {"name": "Ada", "admin": False},
        )

    def test_truncated_nesting_fails_quickly(self) -> None:
        """Test that a long run of unclosed openers does not stall."""
        start = time.perf_counter()
        result = jsonrescue.recover("{" * 20000)
        elapsed = time.perf_counter() - start

        self.assertFalse(result.ok)
        self.assertLess(elapsed, 5.0)


class TestBlockCap(unittest.TestCase):
    """At most max_blocks candidates are decoded, in first-found order."""

    TEXT = "{x} {y} {z} {w} {v} {u} {t}"

    def test_default_cap(self) -> None:
        """Test that five candidates are tried by default."""
        tracker = StageTracker()
        result = jsonrescue.recover(self.TEXT, tracker=tracker)
        self.assertFalse(result.ok)
        self.assertEqual(tracker.candidates_tried, 5)
        indexes = [
            a.candidate_index
            for a in tracker.attempts
            if a.stage is RecoveryStage.BLOCK_CANDIDATES
        ]
        self.assertEqual(indexes, [0, 1, 2, 3, 4])

    def test_custom_cap(self) -> None:
        """Test a lower cap."""
        tracker = StageTracker()
        jsonrescue.recover(self.TEXT, tracker=tracker, max_blocks=2)
        self.assertEqual(tracker.candidates_tried, 2)

    def test_valid_block_beyond_cap_is_not_found(self) -> None:
        """Test that a valid block past the cap is never decoded."""
        text = '{x} {y} {"ok": 1}'
        self.assertFalse(jsonrescue.recover(text, max_blocks=2).ok)
        self.assertEqual(jsonrescue.recover(text, max_blocks=3).value, {"ok": 1})

    def test_zero_cap_skips_blocks(self) -> None:
        """Test that a zero cap disables the block stage."""
        tracker = StageTracker()
        result = jsonrescue.recover('prose {"a": 1} prose', tracker=tracker, max_blocks=0)
        self.assertFalse(result.ok)
        self.assertEqual(tracker.candidates_tried, 0)


class TestAggressiveFallback(unittest.TestCase):
    """Test repairs only the last stage makes."""

    def test_raw_newline_inside_string(self) -> None:
        """Test that a raw newline in a string collapses to a space."""
        result = jsonrescue.recover('{"text": "line one\nline two"}')
        self.assertEqual(result.value, {"text": "line one line two"})
        self.assertIs(result.stage, RecoveryStage.AGGRESSIVE_STRICT)

    def test_undefined(self) -> None:
        """Test that undefined becomes null."""
        self.assertEqual(jsonrescue.loads("{a: undefined}"), {"a": None})

    def test_comment_between_comma_and_key(self) -> None:
        """Test a bare key hidden behind a line comment."""
        result = jsonrescue.recover("{a: 1, // first\n b: 2}")
        self.assertEqual(result.value, {"a": 1, "b": 2})
        self.assertIs(result.stage, RecoveryStage.AGGRESSIVE_STRICT)


class TestFailures(unittest.TestCase):
    """Test inputs that nothing can recover."""

    def test_prose_only(self) -> None:
        """Test a refusal with no data in it."""
        result = jsonrescue.recover("I'm sorry, I cannot produce that output.")
        self.assertFalse(result.ok)
        self.assertIsNone(result.value)

    def test_non_text_input(self) -> None:
        """Test payloads that are not strings."""
        for payload in (None, 3.14, b"[1]", object()):
            with self.subTest(payload=payload):
                self.assertFalse(jsonrescue.recover(payload).ok)

    def test_non_standard_numbers_are_not_invented(self) -> None:
        """Test that NaN stays undecodable."""
        self.assertFalse(jsonrescue.recover('{"a": NaN}').ok)

    def test_failure_never_raises(self) -> None:
        """Test fragments that must fail without an exception."""
        for text in ("{", "}", "[[[", '"', "'", "/*", "//", "{a:}", "\\"):
            with self.subTest(text=text):
                self.assertFalse(jsonrescue.recover(text).ok)


if __name__ == "__main__":
    unittest.main()
