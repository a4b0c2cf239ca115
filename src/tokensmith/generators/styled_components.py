"""
styled-components theme generator.
"""

from ..core.ir import OutputFormat
from ..core.strings import to_camel_case
from .base import Generator, GeneratorResult, banner, css_declarations, js_identifier
from .theme import color_usage_lines, default_font_family_expression, theme_constant

_GET_COLOR_HELPER = """
export const getColor = (path: string) => {
  const keys = path.split('.');
  let result: unknown = theme.colors;

  for (const key of keys) {
    if (typeof result === 'object' && result !== null && key in result) {
      result = (result as Record<string, unknown>)[key];
    } else {
      return undefined;
    }
  }

  return result as string | undefined;
};
"""


def mixin_name(device: str, locale: str, style_name: str) -> str:
    """``typo-mobile-kr-title1-700`` -> ``typoMobileKrTitle1700``."""
    return js_identifier(to_camel_case(f"typo-{device}-{locale}-{style_name}"))


class StyledComponentsGenerator(Generator):
    """theme.ts, styled.d.ts, mixins.ts, GlobalStyle.tsx and ThemeProvider.tsx."""

    format = OutputFormat.STYLED_COMPONENTS

    def generate(self) -> list[GeneratorResult]:
        results = [
            self._result("theme.ts", "typescript", self._theme_file()),
            self._result("styled.d.ts", "typescript", self._type_declaration()),
        ]
        if self.tokens.has_typography:
            results.append(self._result("mixins.ts", "typescript", self._mixins_file()))
        results.append(self._result("GlobalStyle.tsx", "typescript", self._global_style()))
        results.append(self._result("ThemeProvider.tsx", "typescript", self._provider_file()))
        return results

    def _theme_file(self) -> str:
        return (
            banner("Styled-Components Theme")
            + "\n"
            + theme_constant(self.tokens)
            + "\n"
            + "// Color access helper"
            + _GET_COLOR_HELPER
        )

    def _type_declaration(self) -> str:
        return (
            banner("Styled-Components Theme Type Declaration")
            + "\n"
            + "import 'styled-components';\n"
            + "import { theme } from './theme';\n"
            + "\n"
            + "type ThemeType = typeof theme;\n"
            + "\n"
            + "declare module 'styled-components' {\n"
            + "  export interface DefaultTheme extends ThemeType {}\n"
            + "}\n"
        )

    def _sample_mixin(self) -> str | None:
        for device, locale, style_name, _ in self.tokens.iter_typography():
            return mixin_name(device, locale, style_name)
        return None

    def _mixins_file(self) -> str:
        sample = self._sample_mixin()
        usage = [
            "import styled from 'styled-components';",
            f"import {{ {sample} }} from './mixins';",
            "",
            "const Title = styled.h1`",
            f"  ${{{sample}}}",
            "`;",
        ]
        blocks = []
        for device, locale, style_name, token in self.tokens.iter_typography():
            declarations = "\n".join(css_declarations(token))
            blocks.append(
                f"export const {mixin_name(device, locale, style_name)} = css`\n{declarations}\n`;\n"
            )
        return (
            banner("Typography Mixins for Styled-Components", usage=usage)
            + "\n"
            + "import { css } from 'styled-components';\n"
            + "\n"
            + "\n".join(blocks)
        )

    def _global_style(self) -> str:
        font_family = default_font_family_expression(self.tokens)
        return (
            banner("Global Styles", editable=True)
            + "\n"
            + "import { createGlobalStyle } from 'styled-components';\n"
            + "\n"
            + "export const GlobalStyle = createGlobalStyle`\n"
            + "  * {\n"
            + "    box-sizing: border-box;\n"
            + "    margin: 0;\n"
            + "    padding: 0;\n"
            + "  }\n"
            + "\n"
            + "  body {\n"
            + f"    font-family: ${{({{ theme }}) => {font_family}}};\n"
            + "    -webkit-font-smoothing: antialiased;\n"
            + "    -moz-osx-font-smoothing: grayscale;\n"
            + "  }\n"
            + "`;\n"
        )

    def _provider_file(self) -> str:
        example = [
            "// Usage:",
            "//",
            "// // _app.tsx",
            "// import { ThemeProvider } from './ThemeProvider';",
            "//",
            "// export default function App({ Component, pageProps }) {",
            "//   return (",
            "//     <ThemeProvider>",
            "//       <Component {...pageProps} />",
            "//     </ThemeProvider>",
            "//   );",
            "// }",
        ]
        sample = self._sample_mixin()
        color_lines = color_usage_lines(self.tokens)
        if sample or color_lines:
            example += ["//", "// // in a component", "// import styled from 'styled-components';"]
            if sample:
                example.append(f"// import {{ {sample} }} from './mixins';")
            example += ["//", "// const Title = styled.h1`"]
            if sample:
                example.append(f"//   ${{{sample}}}")
            example += [f"// {line}" for line in color_lines]
            example.append("// `;")
        return (
            banner("Theme Provider", editable=True)
            + "\n"
            + "import { ThemeProvider as StyledThemeProvider } from 'styled-components';\n"
            + "import { theme } from './theme';\n"
            + "import { GlobalStyle } from './GlobalStyle';\n"
            + "\n"
            + "interface Props {\n"
            + "  children: React.ReactNode;\n"
            + "}\n"
            + "\n"
            + "export function ThemeProvider({ children }: Props) {\n"
            + "  return (\n"
            + "    <StyledThemeProvider theme={theme}>\n"
            + "      <GlobalStyle />\n"
            + "      {children}\n"
            + "    </StyledThemeProvider>\n"
            + "  );\n"
            + "}\n"
            + "\n"
            + "\n".join(example)
            + "\n"
        )
