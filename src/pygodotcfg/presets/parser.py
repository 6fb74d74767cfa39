# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/14 20:03:12
# @Author : Kariko Lin

"""`export_presets.cfg` is a plain Godot config file following the convention:

    ```ini
    [preset.0]

    name="Android"
    platform="Android"
    runnable=true

    [preset.0.options]

    package/unique_name="com.example.$genname"
    ```

`preset.N` sections are sorted by `N`, pairing with `preset.N.options`.
"""

import logging
import re
import warnings
from copy import deepcopy

from ..abstract import FileHandler
from ..cfg import ConfigFile, ParseError, parse_document, serialize_document
from .model import (
    OPTIONS_KEY,
    OPTIONS_SECTION_SUFFIX,
    PRESET_SECTION_PREFIX,
    ExportPreset,
    ExportPresetsFile,
)

__all__ = [
    'presets_from_config', 'presets_to_config',
    'parse_export_presets', 'serialize_export_presets',
    'ExportPresetsParser', 'load_export_presets', 'save_export_presets'
]

_PRESET_SECTION = re.compile(r'^preset\.(\d+)$')


def _preset_sections(config: ConfigFile) -> list[tuple[int, str]]:
    ret = []
    for section in config:
        if (m := _PRESET_SECTION.match(section)) is not None:
            ret.append((int(m.group(1)), section))
        elif section.startswith(PRESET_SECTION_PREFIX) \
                and not section.endswith(OPTIONS_SECTION_SUFFIX):
            warnings.warn(f'[{section}] is not a valid preset section, skipped.')
    ret.sort()
    return ret


def presets_from_config(config: ConfigFile) -> ExportPresetsFile:
    """Extract presets from a parsed document.

    Values are deep copied, editing the presets won't touch `config`.
    """
    ret = ExportPresetsFile()
    for _, section in _preset_sections(config):
        preset = ExportPreset(name='', platform='', runnable=False)
        for k, v in config[section].items():
            if k == OPTIONS_KEY:
                warnings.warn(
                    f'[{section}] holds an "{OPTIONS_KEY}" key, ignored. '
                    f'Options belong to [{section}{OPTIONS_SECTION_SUFFIX}].')
                continue
            preset[k] = deepcopy(v)

        options = section + OPTIONS_SECTION_SUFFIX
        if config.has_section(options):
            preset['options'] = deepcopy(config[options].to_dict())
        ret.presets.append(preset)
    return ret


def presets_to_config(presets: ExportPresetsFile) -> ConfigFile:
    """Renumber presets `0..n-1` by list order."""
    ret = ConfigFile()
    for i, preset in enumerate(presets.presets):
        section = f'{PRESET_SECTION_PREFIX}{i}'
        for k, v in preset.items():
            if k != OPTIONS_KEY:
                ret.set_value(section, k, v)
        for k, v in (preset.get('options') or {}).items():
            ret.set_value(section + OPTIONS_SECTION_SUFFIX, k, v)
    return ret


def parse_export_presets(content: str) -> ExportPresetsFile:
    """Raises `ParseError` if `content` is malformed."""
    config, error = parse_document(content)
    if error is not None:
        raise error
    return presets_from_config(config)


def serialize_export_presets(presets: ExportPresetsFile) -> str:
    return serialize_document(presets_to_config(presets))


class ExportPresetsParser(FileHandler[ExportPresetsFile]):
    def read(self) -> ExportPresetsFile:
        try:
            return parse_export_presets(self._open_text().read())
        except (OSError, ParseError) as e:
            logging.warning(f'failed to load presets from {self._fn}: {e}')
            raise

    def write(self, instance: ExportPresetsFile) -> None:
        with open(self._fn, 'w', encoding=self._codec or 'utf-8',
                  newline='\n') as fp:
            fp.write(serialize_export_presets(instance))
        logging.info(f'{len(instance.presets)} presets saved to {self._fn}')

    def __str__(self) -> str:
        return "Export presets: " + super().__str__()


def load_export_presets(
    filename: str, encoding: str | None = None
) -> ExportPresetsFile:
    return ExportPresetsParser(filename, encoding).read()


def save_export_presets(
    filename: str, presets: ExportPresetsFile, encoding: str | None = None
) -> None:
    ExportPresetsParser(filename, encoding).write(presets)
