import html
import string
from dataclasses import dataclass

from asciiframes.errors import InvalidParameter

MIN_ZOOM = 1
MAX_ZOOM = 20

_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>ASCII Art Visualization</title>
    <style>
        body {{
            margin: 0;
            padding: 20px;
            background-color: #{background};
            color: #{text_color};
            font-family: {font_family}, monospace;
            font-size: {font_size}px;
            line-height: 1;
            overflow: auto;
        }}

        .ascii-container {{
            white-space: pre;
            letter-spacing: 0;
            word-spacing: 0;
            display: inline-block;
        }}

        @media (max-width: 1200px) {{
            body {{ font-size: {size_large}px; }}
        }}

        @media (max-width: 800px) {{
            body {{ font-size: {size_medium}px; }}
        }}

        @media (max-width: 600px) {{
            body {{ font-size: {size_small}px; }}
        }}
    </style>
</head>
<body>
    <div class="ascii-container">{content}</div>

    <script>
        let fontSize = {font_size};
        const body = document.body;

        function updateFontSize() {{
            body.style.fontSize = fontSize + 'px';
        }}

        document.addEventListener('keydown', function(e) {{
            if (e.ctrlKey || e.metaKey) {{
                if (e.key === '+' || e.key === '=') {{
                    e.preventDefault();
                    fontSize = Math.min(fontSize + 1, {max_zoom});
                    updateFontSize();
                }} else if (e.key === '-') {{
                    e.preventDefault();
                    fontSize = Math.max(fontSize - 1, {min_zoom});
                    updateFontSize();
                }} else if (e.key === '0') {{
                    e.preventDefault();
                    fontSize = {font_size};
                    updateFontSize();
                }}
            }}
        }});

        document.addEventListener('wheel', function(e) {{
            if (e.ctrlKey || e.metaKey) {{
                e.preventDefault();
                if (e.deltaY < 0) {{
                    fontSize = Math.min(fontSize + 1, {max_zoom});
                }} else {{
                    fontSize = Math.max(fontSize - 1, {min_zoom});
                }}
                updateFontSize();
            }}
        }}, {{ passive: false }});
    </script>
</body>
</html>
"""


def validate_hex_color(value: str) -> None:
    if len(value) != 6:
        raise InvalidParameter(f"Color must be 6 hex digits (e.g., ffffff), got {value!r}")
    if not all(c in string.hexdigits for c in value):
        raise InvalidParameter(f"Invalid hex color: {value}")


@dataclass
class HtmlConfig:
    font_size: int = 1
    background_color: str = "000000"
    text_color: str = "ffffff"
    font_family: str = "monospace"

    def validate(self) -> None:
        if self.font_size < 1:
            raise InvalidParameter(f"--font-size must be positive, got {self.font_size}")
        validate_hex_color(self.background_color)
        validate_hex_color(self.text_color)


def ascii_to_html(text: str, config: HtmlConfig | None = None) -> str:
    """Wrap a glyph grid in a standalone, zoomable HTML page."""
    if not text:
        return ""
    config = config or HtmlConfig()
    config.validate()
    return _TEMPLATE.format(
        background=config.background_color,
        text_color=config.text_color,
        font_family=html.escape(config.font_family),
        font_size=config.font_size,
        size_large=max(config.font_size - 1, 1),
        size_medium=max(config.font_size - 2, 1),
        size_small=max(config.font_size - 3, 1),
        content=html.escape(text, quote=False),
        min_zoom=MIN_ZOOM,
        max_zoom=MAX_ZOOM,
    )
