"""
Format generators.

Each OutputFormat maps to exactly one Generator subclass. ``generate`` is the
single dispatch point used by the CLI and the public API.
"""

import logging
from dataclasses import dataclass

from ..core.errors import UnknownFormatError
from ..core.ir import NormalizedTokens, OutputFormat
from .base import Generator, GeneratorResult
from .css_variables import CSSVariablesGenerator
from .emotion import EmotionGenerator
from .panda_css import PandaCSSGenerator
from .scss import SCSSGenerator
from .styled_components import StyledComponentsGenerator
from .tailwind import TailwindGenerator
from .vanilla_extract import VanillaExtractGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormatInfo:
    """
    Describes an output format.

    Used for the ``formats`` listing and CLI help text.
    """

    name: str
    description: str


GENERATORS: dict[OutputFormat, type[Generator]] = {
    OutputFormat.TAILWIND: TailwindGenerator,
    OutputFormat.CSS_VARIABLES: CSSVariablesGenerator,
    OutputFormat.SCSS: SCSSGenerator,
    OutputFormat.EMOTION: EmotionGenerator,
    OutputFormat.STYLED_COMPONENTS: StyledComponentsGenerator,
    OutputFormat.VANILLA_EXTRACT: VanillaExtractGenerator,
    OutputFormat.PANDA_CSS: PandaCSSGenerator,
}

FORMAT_INFO: dict[OutputFormat, FormatInfo] = {
    OutputFormat.TAILWIND: FormatInfo("Tailwind CSS", "Utility-first CSS framework"),
    OutputFormat.CSS_VARIABLES: FormatInfo("CSS Variables", "Native CSS custom properties"),
    OutputFormat.SCSS: FormatInfo("SCSS", "Sass with variables & mixins"),
    OutputFormat.EMOTION: FormatInfo("Emotion", "CSS-in-JS library"),
    OutputFormat.STYLED_COMPONENTS: FormatInfo("styled-components", "CSS-in-JS with tagged templates"),
    OutputFormat.VANILLA_EXTRACT: FormatInfo("Vanilla Extract", "Zero-runtime CSS-in-TypeScript"),
    OutputFormat.PANDA_CSS: FormatInfo("Panda CSS", "Zero-runtime CSS-in-JS"),
}


def resolve_format(fmt: OutputFormat | str) -> OutputFormat:
    """
    Coerce a format name to OutputFormat.

    Raises:
        UnknownFormatError: If ``fmt`` names no known format
    """
    try:
        return OutputFormat(fmt)
    except ValueError:
        available = ", ".join(f.value for f in OutputFormat)
        raise UnknownFormatError(f"Unknown format '{fmt}'. Available formats: {available}") from None


def generate(tokens: NormalizedTokens, fmt: OutputFormat | str) -> list[GeneratorResult]:
    """
    Render ``tokens`` into the artifacts of one output format.

    Args:
        tokens: Parsed token model; never modified
        fmt: Target format, as an OutputFormat or its string value

    Returns:
        Artifacts in display order

    Raises:
        UnknownFormatError: If ``fmt`` names no known format
    """
    output_format = resolve_format(fmt)
    results = GENERATORS[output_format](tokens).generate()
    logger.debug(
        "Generated %d artifact(s) for %s: %s",
        len(results),
        output_format.value,
        ", ".join(r.filename for r in results),
    )
    return results


__all__ = [
    "FORMAT_INFO",
    "GENERATORS",
    "FormatInfo",
    "Generator",
    "GeneratorResult",
    "generate",
    "resolve_format",
]
