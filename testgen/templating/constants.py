"""Fixed text fragments emitted into generated test suites."""

from __future__ import annotations

INDENT = "    "
BODY_INDENT = INDENT * 2

BASE_IMPORTS: tuple[str, ...] = (
    "import org.junit.jupiter.api.Test;",
    "import org.junit.jupiter.api.extension.ExtendWith;",
    "import org.mockito.InjectMocks;",
    "import org.mockito.Mock;",
    "import org.mockito.Mockito;",
    "import org.mockito.junit.jupiter.MockitoExtension;",
    "import static org.mockito.Mockito.*;",
    "import static org.junit.jupiter.api.Assertions.*;",
)

WIRING_IMPORTS: tuple[str, ...] = (
    "import org.springframework.boot.test.context.SpringBootTest;",
    "import org.springframework.boot.test.mock.mockito.MockBean;",
)

EXTENSION_MARKER = "@ExtendWith(MockitoExtension.class)"
INJECT_MARKER = "@InjectMocks"
MOCK_MARKER = "@Mock"
TEST_MARKER = "@Test"

TEST_NAME_SUFFIX = "_ShouldSucceed"
TEST_CLASS_SUFFIX = "Test"

# Emitted verbatim; not derived from the class under test.
PLACEHOLDER_VERIFICATION = "verify(mockDependency, times(1)).someMethod();"

DEFAULT_TODOS: dict[str, str] = {
    "Given": "// TODO: Set up test data",
    "When": "// TODO: Call method under test",
    "Then": "// TODO: Add assertions",
}


__all__ = [
    "BASE_IMPORTS",
    "BODY_INDENT",
    "DEFAULT_TODOS",
    "EXTENSION_MARKER",
    "INDENT",
    "INJECT_MARKER",
    "MOCK_MARKER",
    "PLACEHOLDER_VERIFICATION",
    "TEST_CLASS_SUFFIX",
    "TEST_MARKER",
    "TEST_NAME_SUFFIX",
    "WIRING_IMPORTS",
]
