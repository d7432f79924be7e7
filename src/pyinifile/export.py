# -*- encoding: utf-8 -*-
# @File   : export.py
# @Time   : 2024/10/13 01:20:44
# @Author : Kariko Lin

"""Dump parsed INI values as YAML, keeping their types visible.

    ```yaml
    PLAYER_DATA:
      name: Hero
      score: 100
      positionX: 12.5
    VISITED_PLACES:
      tavern: true
    ```
"""

from typing import TextIO

import yaml

from .ini import IniFile, IniTables


def dump_yaml(
    ini: IniFile | IniTables,
    stream: TextIO | None = None, *,
    indent: int = 2
) -> str | None:
    """Returns the document when `stream` is None, like `yaml.dump`."""
    data = ini.to_dict()
    # sort_keys would break section order, which users care about.
    return yaml.safe_dump(
        data, stream,
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
        indent=indent)
