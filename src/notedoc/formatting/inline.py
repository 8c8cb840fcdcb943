"""Inline Markdown formatting to styled runs."""

import re
from typing import Optional

from notedoc.formatting.ir import DEFAULT_THEME, Run, Theme


class InlineFormatter:
    """Turn inline Markdown text into styled runs.

    Recognises four marker classes, scanned left to right with the earliest
    match winning:
    - **bold**
    - *italic*
    - `code`
    - [label](target) links and ![alt](target) images

    A marker never spans a newline. Anything else, including unpaired
    delimiters, is kept as literal text in the base style.
    """

    # Order matters: bold before italic so "**" is not read as two "*"
    INLINE_PATTERN = re.compile(
        r"(?P<bold>\*\*(?P<bold_text>[^*\n]+)\*\*)"
        r"|(?P<italic>\*(?P<italic_text>[^*\n]+)\*)"
        r"|(?P<code>`(?P<code_text>[^`\n]+)`)"
        r"|(?P<link>(?P<bang>!?)\[(?P<label>[^\]\n]+)\]\((?P<target>[^)\n]+)\))"
    )

    # Resolved link targets are set slightly smaller than the body text
    LINK_TARGET_SIZE_DELTA = 2

    def __init__(self, theme: Optional[Theme] = None) -> None:
        self.theme = theme or DEFAULT_THEME

    def base_run(self, text: str, **overrides) -> Run:
        """Create a run in the base style, with optional overrides."""
        attrs = {
            "size": self.theme.size,
            "font": self.theme.font,
            "color": self.theme.color,
        }
        attrs.update(overrides)
        return Run(text=text, **attrs)

    def format(self, text: str) -> list[Run]:
        """Convert inline Markdown text into runs.

        Args:
            text: Raw inline text of a paragraph, list item or table row

        Returns:
            Runs in reading order, never empty
        """
        runs: list[Run] = []
        last = 0

        for match in self.INLINE_PATTERN.finditer(text):
            if match.start() > last:
                runs.append(self.base_run(text[last:match.start()]))
            runs.extend(self._marker_runs(match))
            last = match.end()

        if last < len(text):
            runs.append(self.base_run(text[last:]))

        return runs or [self.base_run(text)]

    def _marker_runs(self, match: re.Match) -> list[Run]:
        """Build the runs for one matched marker."""
        if match.group("bold"):
            return [self.base_run(match.group("bold_text"), bold=True)]

        if match.group("italic"):
            return [self.base_run(match.group("italic_text"), italic=True)]

        if match.group("code"):
            return [
                self.base_run(
                    match.group("code_text"),
                    monospace=True,
                    font=self.theme.monospace_font,
                )
            ]

        label = match.group("label")
        if match.group("bang"):
            # Images are never embedded, only their alt text survives
            return [self.base_run(f"[Image: {label}]", italic=True)]

        target = match.group("target")
        return [
            self.base_run(label, underline=True),
            self.base_run(
                f" ({target})",
                italic=True,
                size=self.theme.size - self.LINK_TARGET_SIZE_DELTA,
            ),
        ]


def format_inline(text: str, theme: Optional[Theme] = None) -> list[Run]:
    """Convert inline Markdown text into runs using ``theme``."""
    return InlineFormatter(theme).format(text)
