"""
Vanilla Extract generator.

Colors are flattened to dot-joined keys so the same map feeds both the global
theme contract and sprinkles. Font sizes are sorted ascending and keyed by
position on a t-shirt ladder.
"""

import json

from ..core.ir import Number, OutputFormat
from ..core.strings import capitalize_first, font_family_slug, format_number, strip_hyphens
from ..core.tree import render_nested, to_literal, walk_leaves
from .base import Generator, GeneratorResult, banner, js_identifier, js_key, js_path, px

SIZE_LABELS = ("xs", "sm", "md", "base", "lg", "xl", "2xl", "3xl", "4xl", "5xl")

_SPRINKLES = """
import { defineProperties, createSprinkles } from '@vanilla-extract/sprinkles';
import { vars } from './tokens.css';

const responsiveProperties = defineProperties({
  conditions: {
    mobile: {},
    tablet: { '@media': 'screen and (min-width: 768px)' },
    desktop: { '@media': 'screen and (min-width: 1024px)' },
  },
  defaultCondition: 'mobile',
  properties: {
    color: vars.color,
    backgroundColor: vars.color,
    fontSize: vars.fontSize,
    fontFamily: vars.font.family,
    fontWeight: vars.fontWeight,
    lineHeight: vars.lineHeight,
  },
});

export const sprinkles = createSprinkles(responsiveProperties);

export type Sprinkles = Parameters<typeof sprinkles>[0];
"""


def size_scale(sizes: list[Number]) -> dict[str, str]:
    """Ascending sizes keyed by ladder position; sizes past the ladder keep their number."""
    return {
        SIZE_LABELS[index] if index < len(SIZE_LABELS) else format_number(size): px(size)
        for index, size in enumerate(sizes)
    }


def recipe_name(device: str, locale: str, style_name: str) -> str:
    """``mobile``/``kr``/``title1-700`` -> ``mobileKrTitle1700``."""
    return js_identifier(
        device + capitalize_first(locale) + capitalize_first(strip_hyphens(style_name))
    )


class VanillaExtractGenerator(Generator):
    """tokens.css.ts, typography.css.ts, sprinkles.css.ts and example.ts."""

    format = OutputFormat.VANILLA_EXTRACT

    def generate(self) -> list[GeneratorResult]:
        results = [self._result("tokens.css.ts", "typescript", self._tokens_file())]
        if self.tokens.has_typography:
            results.append(self._result("typography.css.ts", "typescript", self._recipes_file()))
        results.append(
            self._result("sprinkles.css.ts", "typescript", banner("Vanilla Extract Sprinkles") + _SPRINKLES)
        )
        results.append(self._result("example.ts", "typescript", self._example_file()))
        return results

    def flat_colors(self) -> dict[str, str]:
        return {".".join(path): value for path, value in walk_leaves(self.tokens.colors)}

    def _tokens_file(self) -> str:
        families = {
            font_family_slug(family): f"'{family}', sans-serif"
            for family in self.tokens.font_families()
        }
        line_heights = {format_number(h): px(h) for h in self.tokens.line_heights()}
        return (
            banner("Vanilla Extract Design Tokens")
            + "\n"
            + "import { createGlobalTheme } from '@vanilla-extract/css';\n"
            + "\n"
            + "export const vars = createGlobalTheme(':root', {\n"
            + f"  color: {to_literal(self.flat_colors(), base_indent='  ')},\n"
            + "\n"
            + "  font: {\n"
            + f"    family: {to_literal(families, base_indent='    ')},\n"
            + "  },\n"
            + "\n"
            + f"  fontSize: {to_literal(size_scale(self.tokens.font_sizes()), base_indent='  ')},\n"
            + "\n"
            + f"  lineHeight: {to_literal(line_heights, base_indent='  ')},\n"
            + "\n"
            + "  fontWeight: {\n"
            + "    regular: '400',\n"
            + "    medium: '500',\n"
            + "    bold: '700',\n"
            + "  },\n"
            + "});\n"
        )

    def _recipes_file(self) -> str:
        blocks: list[str] = []
        index: dict[str, dict[str, dict[str, str]]] = {}
        for device, locale, style_name, token in self.tokens.iter_typography():
            name = recipe_name(device, locale, style_name)
            stack = f"'{token.font_family}', sans-serif"
            props = [
                f"  fontFamily: {json.dumps(stack)},",
                f"  fontSize: '{px(token.font_size)}',",
                f"  fontWeight: {format_number(token.font_weight)},",
                f"  lineHeight: '{px(token.line_height)}',",
            ]
            if token.letter_spacing:
                props.append(f"  letterSpacing: '{px(token.letter_spacing)}',")
            blocks.append(f"export const {name} = style({{\n" + "\n".join(props) + "\n});\n")
            index.setdefault(device, {}).setdefault(locale, {})[strip_hyphens(style_name)] = name

        body = render_nested(
            index,
            leaf=lambda key, value, last: f"{js_key(key)}: {value},",
            open_scope=lambda key: f"{js_key(key)}: {{",
            close_scope=lambda last: "},",
            depth=1,
        )
        return (
            banner("Typography Recipes for Vanilla Extract")
            + "\n"
            + "import { style } from '@vanilla-extract/css';\n"
            + "\n"
            + "\n".join(blocks)
            + "\n"
            + "// Typography object for convenient access\n"
            + "export const typography = {\n"
            + "\n".join(body)
            + "\n};\n"
        )

    def _example_file(self) -> str:
        colors = list(self.flat_colors())
        lines = [
            "// 1. Base styles (in a *.css.ts file)",
            "import { style } from '@vanilla-extract/css';",
            "import { vars } from './tokens.css';",
        ]
        if self.tokens.has_typography:
            lines.append("import { typography } from './typography.css';")
        lines.append("")

        container = ["  padding: '16px',"]
        if colors:
            container.insert(0, f"  backgroundColor: vars.color[{json.dumps(colors[0])}],")
        lines += ["export const container = style({", *container, "});", ""]

        if self.tokens.has_typography:
            device, locale, style_name, _ = next(self.tokens.iter_typography())
            access = js_path([device, locale, strip_hyphens(style_name)])
            title = ["export const title = style([", f"  typography{access},"]
            if colors:
                title += ["  {", f"    color: vars.color[{json.dumps(colors[-1])}],", "  },"]
            lines += [*title, "]);", ""]

        lines += [
            "// 2. Sprinkles",
            "import { sprinkles } from './sprinkles.css';",
            "",
            "export const box = style([",
            "  sprinkles({",
        ]
        if colors:
            lines.append(f"    color: {{ mobile: {json.dumps(colors[0])}, desktop: {json.dumps(colors[-1])} }},")
        sizes = size_scale(self.tokens.font_sizes())
        if sizes:
            lines.append(f"    fontSize: {json.dumps(next(iter(sizes)))},")
        lines += ["  }),", "]);"]

        return banner("Vanilla Extract Usage Example", editable=True) + "\n" + "\n".join(lines) + "\n"
