"""Plain-text rendering of an extraction result or error."""

from __future__ import annotations

from pdf_extractor.extractor.types import ExtractionResult

TABLE_PREVIEW_ROWS = 3


def render_preview(result: ExtractionResult) -> str:
    """Render the sections present in *result*, one block per category."""
    sections = [f"Pages: {result.page_count}"]

    if result.text is not None:
        sections.append(f"## Text Content\n\n{result.text}")

    if result.tables is not None:
        lines = [f"## Tables ({len(result.tables)} rows)", ""]
        lines.extend(" | ".join(row) for row in result.tables[:TABLE_PREVIEW_ROWS])
        remaining = len(result.tables) - TABLE_PREVIEW_ROWS
        if remaining > 0:
            lines.append(f"... and {remaining} more rows")
        sections.append("\n".join(lines))

    if result.images is not None:
        lines = [f"## Images ({len(result.images)} found)", ""]
        lines.extend(f"- {line}" for line in result.images)
        sections.append("\n".join(lines))

    return "\n\n".join(sections) + "\n"


def render_error(message: str) -> str:
    return f"Extraction failed: {message}\n"
