"""
High-level orchestration for vocabulary.

The app is responsible for:
  - announcing the run,
  - overlaying the optional configuration file onto the default settings,
  - choosing the card store from the settings, and
  - running the interactive prompt loop when manual input was requested.
"""

from __future__ import annotations

import logging
from dataclasses import fields, replace
from pathlib import Path
from typing import List, Optional, TextIO

from .config import Options, Settings
from .config_loader import ConfigNode, read_config
from .console import Colorizer
from .domain import Card
from .prompt import CardPrompt
from .store import CardStore, JsonLinesCardStore

LOG = logging.getLogger(__name__)

CONFIG_FILENAME = "vocabulary.yaml"


def load_settings(defaults: Optional[Settings] = None) -> Settings:
    """
    Return defaults updated with the fields set in <config_dir>/vocabulary.yaml.

    A missing file leaves the defaults as they are. Unknown top-level
    fields, and known fields whose value is a mapping or a list, are
    logged and ignored.
    """

    defaults = defaults or Settings()
    path = Path(defaults.config_dir) / CONFIG_FILENAME
    if not path.is_file():
        LOG.debug("No configuration file at %s; using defaults", path)
        return defaults

    config = read_config(str(path), encoding=defaults.encoding)
    known = {field.name for field in fields(Settings)}

    overrides = {}
    for name in config:
        value = config[name]
        if name not in known:
            LOG.warning("Ignoring unknown setting %r in %s", name, path)
        elif isinstance(value, (ConfigNode, list)):
            LOG.warning("Ignoring setting %r in %s: expected a single value", name, path)
        elif value is not None:
            overrides[name] = str(value)
    return replace(defaults, **overrides)


def run(
    options: Options,
    settings: Optional[Settings] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    colorizer: Optional[Colorizer] = None,
    store: Optional[CardStore] = None,
    end_marker: Optional[str] = None,
) -> List[Card]:
    """
    Execute a vocabulary run and return the cards entered during it.
    """

    settings = settings or load_settings()
    colorizer = colorizer or Colorizer(enabled=options.colorize)

    LOG.info("Starting vocabulary run")
    if options.colorize:
        LOG.debug("Colorizing output as requested")

    if not options.manual_input:
        LOG.info("No input mode selected; nothing to do")
        return []

    if store is None:
        store = JsonLinesCardStore(settings.card_store_path, encoding=settings.encoding)

    prompt = CardPrompt(
        store,
        stdin=stdin,
        stdout=stdout,
        colorizer=colorizer,
        end_marker=end_marker,
    )
    cards = prompt.run()
    LOG.info("Finished vocabulary run with %d card(s) entered", len(cards))
    return cards
