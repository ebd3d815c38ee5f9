"""Shared test fixtures for receipt suggest tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path so we can import the modules
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def cash_receipt_text() -> str:
    """OCR text of an official receipt, with the double spaces OCR leaves behind."""
    return "Official Receipt No: OR-445521  Amount: PHP 1,250.00  Mar 28, 2026 2:45 PM"


@pytest.fixture
def handwritten_or_text() -> str:
    """Cash receipt with no digit run long enough to pass as a transfer reference."""
    return (
        "OFFICIAL RECEIPT\n"
        "O.R. No. A-10234X\n"
        "Received from Juan dela Cruz\n"
        "the sum of PHP 2,500.00\n"
        "Date: 03/28/2026   9:05 AM\n"
    )


@pytest.fixture
def bank_transfer_text() -> str:
    """OCR text of an e-wallet to bank transfer confirmation."""
    return (
        "Transfer from\n"
        "GCash\n"
        "Transfer to BDO\n"
        "Amount: PHP 9,000.00\n"
        "Ref No. 1012345678901\n"
        "Sep 21, 2025 10:20 AM\n"
    )


@pytest.fixture
def garbage_text() -> str:
    """Unreadable OCR output."""
    return "~~ |||  ' .. ;; \x00\x01 ___ ¦¦ "
