"""Unit tests for identifier generation."""

from ulid import ULID

from shared_kernel.identity import IdGenerator, UlidIdGenerator, default_id_generator


class TestUlidIdGenerator:
    """Tests for UlidIdGenerator."""

    def test_generates_valid_ulid(self):
        value = UlidIdGenerator().new_id()

        assert len(value) == 26
        assert str(ULID.from_str(value)) == value

    def test_generates_unique_values(self):
        generator = UlidIdGenerator()

        values = {generator.new_id() for _ in range(100)}

        assert len(values) == 100

    def test_satisfies_protocol(self):
        assert isinstance(UlidIdGenerator(), IdGenerator)


class TestDefaultIdGenerator:
    """Tests for the process-wide default generator."""

    def test_returns_same_instance(self):
        assert default_id_generator() is default_id_generator()

    def test_is_ulid_based(self):
        assert isinstance(default_id_generator(), UlidIdGenerator)


class TestCustomGenerators:
    """Any object with new_id() can stand in for the default."""

    def test_plain_class_satisfies_protocol(self):
        class Fixed:
            def new_id(self) -> str:
                return "fixed"

        assert isinstance(Fixed(), IdGenerator)
