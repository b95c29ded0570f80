"""
Anglo Locale entry point.

Exposes the translator as FastMCP tools and as an HTTP API; ``main()`` picks
the transport from the environment.
"""

import json
import logging
from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from .config import Settings
from .dictionaries import DictionaryStore
from .models import Direction
from .server import run_server
from .translator import Translator, get_translator

logger = logging.getLogger("anglo-locale")

mcp = FastMCP(
    name="anglo-locale"
)

_translator: Optional[Translator] = None


def _active_translator() -> Translator:
    return _translator or get_translator()


# ----------------------------------------------------------------------
# Tools
# ----------------------------------------------------------------------

@mcp.tool
def translate_text(
    text: Annotated[str, Field(description="English sentence to convert")],
    locale: Annotated[str, Field(description="Either 'american-to-british' or 'british-to-american'")],
) -> str:
    """Convert a sentence between American and British English.

    Returns a JSON object with `text` and `translation` (substitutions wrapped in
    `<span class="highlight">`), or with `error` when the input is rejected.
    """
    outcome = _active_translator().translate(text, locale)
    return json.dumps(outcome.model_dump(), ensure_ascii=False)


@mcp.tool
def list_locales() -> str:
    """List the locale values accepted by translate_text."""
    return "\n".join(direction.value for direction in Direction)


def main() -> None:
    """Start the HTTP API or the MCP server, as configured."""
    global _translator

    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)

    if settings.data_dir is not None:
        logger.debug(f"📂 Dictionary path: {settings.data_dir}")
        _translator = Translator(DictionaryStore.from_data_dir(settings.data_dir.resolve()))
    else:
        _translator = get_translator()
    logger.debug("✅ Translator initialized")

    if settings.transport == "mcp":
        mcp.run()
    else:
        run_server(settings, _translator)


if __name__ == "__main__":
    main()
