"""Test setup for hyprdocs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from hyprdocs.sources import DocumentBundle  # noqa: E402

VARIABLES_MD = """\
# Variables

## Sections

### General

Settings that apply to every window.

| name | description | type | default |
|---|---|---|---|
| sensitivity | mouse sensitivity | float | 1.0 |
| layout | which layout to use | str | dwindle |

### Decoration

| name | description | type | default |
|---|---|---|---|
| rounding | rounded corners radius | int | 0 |

#### Blur

| name | description | type | default |
|---|---|---|---|
| enabled | enable blur | bool | true |
| size | blur size | int | 8 |
"""

MASTER_LAYOUT_MD = """\
# Master Layout

## Config

| name | description | type | default |
|---|---|---|---|
| mfact | master split factor | float | 0.55 |
"""

DWINDLE_LAYOUT_MD = """\
# Dwindle Layout

## Config

| name | description | type | default |
|---|---|---|---|
| pseudotile | enable pseudotiling | bool | false |
"""

DISPATCHERS_MD = """\
# Dispatchers

## Exec

Runs a shell command.

See [the variables](../Variables/#general) page.

### Rules

Rules can be attached.

## Kill

Closes the active window.
"""


@pytest.fixture
def documents() -> dict[str, str]:
    """Markdown pages keyed by bundle name."""
    return {
        "Variables": VARIABLES_MD,
        "Master-Layout": MASTER_LAYOUT_MD,
        "Dwindle-Layout": DWINDLE_LAYOUT_MD,
        "Dispatchers": DISPATCHERS_MD,
    }


@pytest.fixture
def bundle(documents: dict[str, str]) -> DocumentBundle:
    """Bundle holding the standard documentation pages."""
    return DocumentBundle.from_mapping(documents)
