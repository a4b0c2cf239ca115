"""
Emotion theme generator.
"""

from ..core.ir import OutputFormat
from ..core.strings import strip_hyphens
from ..core.tree import render_nested
from .base import Generator, GeneratorResult, banner, css_declarations, js_key, js_path
from .theme import color_usage_lines, theme_constant

_STYLE_INDENT = " " * 6


class EmotionGenerator(Generator):
    """theme.ts, emotion.d.ts, typography.ts and ThemeProvider.tsx."""

    format = OutputFormat.EMOTION

    def generate(self) -> list[GeneratorResult]:
        results = [
            self._result("theme.ts", "typescript", banner("Emotion Theme") + "\n" + theme_constant(self.tokens)),
            self._result("emotion.d.ts", "typescript", self._type_declaration()),
        ]
        if self.tokens.has_typography:
            results.append(self._result("typography.ts", "typescript", self._typography_file()))
        results.append(self._result("ThemeProvider.tsx", "typescript", self._provider_file()))
        return results

    def _type_declaration(self) -> str:
        return (
            banner("Emotion Theme Type Declaration")
            + "\n"
            + "import '@emotion/react';\n"
            + "import { theme } from './theme';\n"
            + "\n"
            + "type ThemeType = typeof theme;\n"
            + "\n"
            + "declare module '@emotion/react' {\n"
            + "  export interface Theme extends ThemeType {}\n"
            + "}\n"
        )

    def _style_tree(self) -> dict[str, dict[str, dict[str, str]]]:
        tree: dict[str, dict[str, dict[str, str]]] = {}
        for device, locale, style_name, token in self.tokens.iter_typography():
            block = "\n".join(
                ["css`", *css_declarations(token, indent=_STYLE_INDENT + "  "), _STYLE_INDENT + "`"]
            )
            tree.setdefault(device, {}).setdefault(locale, {})[strip_hyphens(style_name)] = block
        return tree

    def _typography_file(self) -> str:
        device, locale, style_name, _ = next(self.tokens.iter_typography())
        sample = js_path([device, locale, strip_hyphens(style_name)])
        usage = [
            "import styled from '@emotion/styled';",
            "import { typography } from './typography';",
            "",
            "const Title = styled.h1`",
            f"  ${{typography{sample}}}",
            "`;",
        ]
        body = render_nested(
            self._style_tree(),
            leaf=lambda key, value, last: f"{js_key(key)}: {value},",
            open_scope=lambda key: f"{js_key(key)}: {{",
            close_scope=lambda last: "},",
            depth=1,
        )
        return (
            banner("Typography Styles for Emotion", usage=usage)
            + "\n"
            + "import { css } from '@emotion/react';\n"
            + "\n"
            + "export const typography = {\n"
            + "\n".join(body)
            + "\n} as const;\n"
        )

    def _provider_file(self) -> str:
        example = [
            "// Usage:",
            "//",
            "// // layout.tsx",
            "// import { ThemeProvider } from './ThemeProvider';",
            "//",
            "// export default function App({ children }) {",
            "//   return <ThemeProvider>{children}</ThemeProvider>;",
            "// }",
        ]
        color_lines = color_usage_lines(self.tokens)
        if color_lines:
            example += [
                "//",
                "// // in a component",
                "// import styled from '@emotion/styled';",
                "//",
                "// const Button = styled.button`",
                *(f"// {line}" for line in color_lines),
                "// `;",
            ]
        return (
            banner("Theme Provider", editable=True)
            + "\n"
            + "import { ThemeProvider as EmotionThemeProvider } from '@emotion/react';\n"
            + "import { theme } from './theme';\n"
            + "\n"
            + "interface Props {\n"
            + "  children: React.ReactNode;\n"
            + "}\n"
            + "\n"
            + "export function ThemeProvider({ children }: Props) {\n"
            + "  return (\n"
            + "    <EmotionThemeProvider theme={theme}>\n"
            + "      {children}\n"
            + "    </EmotionThemeProvider>\n"
            + "  );\n"
            + "}\n"
            + "\n"
            + "\n".join(example)
            + "\n"
        )
