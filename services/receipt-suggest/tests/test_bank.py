"""Tests for the bank-transfer parser and bank name inference."""

import re
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from bank import (
    BANK_PATTERNS,
    bank_name_in,
    find_bank_ref,
    infer_bank,
    parse_bank_text,
    slice_after_marker,
)


class TestFindBankRef:
    def test_ref_no(self):
        assert find_bank_ref("Ref No. 1012345678901") == "1012345678901"

    def test_reference_upper_cased(self):
        assert find_bank_ref("Reference: abc-123456") == "ABC-123456"

    def test_confirmation(self):
        assert find_bank_ref("Confirmation No. x1y2z3w4") == "X1Y2Z3W4"

    def test_transaction_id(self):
        assert find_bank_ref("Txn ID: 9A8B7C6D") == "9A8B7C6D"

    def test_trace(self):
        assert find_bank_ref("Trace No: 778899AB") == "778899AB"

    def test_token_shorter_than_six_falls_back(self):
        assert find_bank_ref("Ref 12AB5 acct 00650802288") == "00650802288"

    def test_nothing(self):
        assert find_bank_ref("Amount PHP 500") is None

    def test_non_ascii_digits_are_not_refs(self):
        assert find_bank_ref("Ref No. ١٢٣٤٥٦٧٨") is None


class TestBankNames:
    def test_dictionary_order_is_stable(self):
        names = [name for name, _ in BANK_PATTERNS]
        assert names[:4] == ["GCash", "Maya", "BDO", "BPI"]
        assert len(names) == len(set(names))

    def test_bank_name_in_is_case_insensitive(self):
        assert bank_name_in("paid via UNION BANK online") == "UnionBank"

    def test_word_boundaries(self):
        # "bdo" inside another word is not BDO
        assert bank_name_in("abdomen") is None

    def test_slice_after_marker_stops_at_boundary(self):
        segment = slice_after_marker("from GCash Account No. 123", re.compile(r"\bfrom\b", re.I))
        assert segment == " GCash "

    def test_slice_after_marker_missing(self):
        assert slice_after_marker("GCash", re.compile(r"\bfrom\b", re.I)) is None


class TestInferBank:
    def test_prefers_sender(self):
        assert infer_bank("Transfer from GCash to BDO") == "GCash"

    def test_sender_beats_earlier_mention(self):
        assert infer_bank("BPI Transfer from UnionBank") == "UnionBank"

    def test_recipient_when_no_sender(self):
        assert infer_bank("Sent to BPI") == "BPI"

    def test_whole_text_fallback(self):
        assert infer_bank("Paid via Maya") == "Maya"

    def test_unknown_bank(self):
        assert infer_bank("Transfer from Juan to Maria") is None


class TestParseBankText:
    def test_end_to_end(self, bank_transfer_text: str):
        result = parse_bank_text(bank_transfer_text)
        assert result.suggested_amount == 9000.0
        assert result.suggested_ref == "1012345678901"
        assert result.suggested_date_time == "2025-09-21T10:20"
        assert result.suggested_bank == "GCash"
        assert "\n" not in result.raw_text

    def test_missing_input(self):
        result = parse_bank_text(None)
        assert result.raw_text == ""
        assert result.suggested_amount is None
        assert result.suggested_ref is None
        assert result.suggested_date_time is None
        assert result.suggested_bank is None
