"""
Base generator classes for token output formats.

Each format has one Generator subclass that projects a NormalizedTokens model
into one or more named text artifacts. Generators are pure: they read the
model, never mutate it, and keep no state between calls.
"""

import json
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..core.ir import GradientToken, NormalizedTokens, OutputFormat, TypographyToken
from ..core.strings import format_number
from ..core.tree import walk_leaves


@dataclass(frozen=True)
class GeneratorResult:
    """
    One generated artifact.

    Attributes:
        filename: Fixed per format, independent of the input
        content: The file text
        language: Syntax-highlighting tag (typescript, css, scss, javascript)
    """

    filename: str
    content: str
    language: str


def banner(title: str, *, editable: bool = False, usage: list[str] | None = None) -> str:
    """Block comment placed at the top of every generated JS/TS/CSS file."""
    lines = ["/**", f" * {title}", " *"]
    if editable:
        lines.append(" * Auto-generated file.")
    else:
        lines.append(" * Auto-generated file. Do not edit directly!")
    if usage:
        lines.append(" *")
        lines.append(" * Usage:")
        lines.extend(f" * {line}".rstrip() for line in usage)
    lines.append(" */")
    return "\n".join(lines) + "\n"


def line_banner(title: str) -> str:
    """``//`` comment header for SCSS partials."""
    return f"// {title}\n// Auto-generated file. Do not edit directly!\n"


def px(value: int | float) -> str:
    return f"{format_number(value)}px"


def css_declarations(token: TypographyToken, indent: str = "  ") -> list[str]:
    """Plain CSS declarations for a text style; letter-spacing only when non-zero."""
    lines = [
        f"{indent}font-family: '{token.font_family}', sans-serif;",
        f"{indent}font-size: {px(token.font_size)};",
        f"{indent}font-weight: {format_number(token.font_weight)};",
        f"{indent}line-height: {px(token.line_height)};",
    ]
    if token.letter_spacing:
        lines.append(f"{indent}letter-spacing: {px(token.letter_spacing)};")
    return lines


class Generator(ABC):
    """
    Base class for all format generators.

    Example:
        class CSSVariablesGenerator(Generator):
            format = OutputFormat.CSS_VARIABLES

            def generate(self) -> list[GeneratorResult]:
                return [self._result("tokens.css", "css", self._build_css())]
    """

    format: OutputFormat

    def __init__(self, tokens: NormalizedTokens):
        """
        Initialize generator.

        Args:
            tokens: Normalized token model (read-only)
        """
        self.tokens = tokens

    @abstractmethod
    def generate(self) -> list[GeneratorResult]:
        """
        Generate artifacts.

        Returns:
            Artifacts in display order
        """
        pass

    def _result(self, filename: str, language: str, content: str) -> GeneratorResult:
        return GeneratorResult(filename=filename, content=content, language=language)


def gradient_css(token: GradientToken) -> str:
    """
    CSS gradient function for a gradient token.

    Radial types render as ``radial-gradient(circle, ...)``, angular types as
    ``conic-gradient(from <rotation>deg, ...)``; everything else is linear.
    """
    stops = ", ".join(
        f"{stop.color} {format_number(round(stop.position * 100, 2))}%" for stop in token.stops
    )
    kind = token.type.lower()
    if "radial" in kind:
        return f"radial-gradient(circle, {stops})"
    if "angular" in kind or "conic" in kind:
        return f"conic-gradient(from {format_number(token.rotation)}deg, {stops})"
    return f"linear-gradient({format_number(token.rotation)}deg, {stops})"


_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def js_key(key: str) -> str:
    """Object-literal key: bare when it is a valid identifier, quoted otherwise."""
    return key if _JS_IDENTIFIER.match(key) else json.dumps(key)


def js_identifier(name: str) -> str:
    """Drop characters that cannot appear in a JS identifier; non-ASCII letters are kept."""
    return "".join(c for c in name if c == "$" or f"_{c}".isidentifier())


def js_path(keys: tuple[str, ...] | list[str]) -> str:
    """Property access chain: ``.primary['100']``."""
    return "".join(f".{key}" if _JS_IDENTIFIER.match(key) else f"[{json.dumps(key)}]" for key in keys)


def first_color_path(tokens: NormalizedTokens) -> tuple[str, ...] | None:
    """Key path of the first color leaf, used in generated usage examples."""
    return next((path for path, _ in walk_leaves(tokens.colors)), None)
