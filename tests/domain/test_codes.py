"""Unit tests for fallback code generation."""

from crm.domain.service.codes import generate_code, resolve_code


class TestGenerateCode:

    def test_prefixed_and_not_blank(self):
        code = generate_code("ORD_")
        assert code.startswith("ORD_")
        assert len(code) > len("ORD_")
        assert code[len("ORD_"):].isdigit()

    def test_uses_clock(self):
        assert generate_code("ITEM_", clock=lambda: 1700000000123) == "ITEM_1700000000123"


class TestResolveCode:

    def test_keeps_user_code(self):
        assert resolve_code("  A-1 ", "ORD_") == "A-1"

    def test_blank_gets_generated(self):
        assert resolve_code("   ", "ORD_", clock=lambda: 42) == "ORD_42"
        assert resolve_code(None, "ORD_", clock=lambda: 42) == "ORD_42"
