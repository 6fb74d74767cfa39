"""Tests for `export_presets.cfg` reading, writing and accessors."""

import pytest

from pygodotcfg.cfg import ConfigFile, PackedStringArray, ParseError
from pygodotcfg.presets import (
    ExportPreset,
    ExportPresetsFile,
    find_preset,
    get_preset,
    load_export_presets,
    parse_export_presets,
    presets_from_config,
    presets_to_config,
    remove_preset,
    save_export_presets,
    serialize_export_presets,
    set_preset,
)

ANDROID_PRESET = """[preset.0]

name="Android"
platform="Android"
runnable=true
dedicated_server=false
custom_features=""
export_filter="all_resources"
include_filter=""
exclude_filter=""
export_path=""
encrypt_pck=false
encrypt_directory=false

[preset.0.options]

package/unique_name="com.example.$genname"
package/name=""
package/signed=true
architectures/arm64-v8a=true
architectures/armeabi-v7a=false
"""

TWO_PRESETS = """[preset.0]

name="Android"
platform="Android"
runnable=true

[preset.0.options]

package/unique_name="com.example"

[preset.1]

name="iOS"
platform="iOS"
runnable=true

[preset.1.options]

application/identifier="com.example.ios"
"""


@pytest.fixture
def presets():
    return ExportPresetsFile([
        ExportPreset(name='Android', platform='Android', runnable=True),
        ExportPreset(name='iOS', platform='iOS', runnable=True),
    ])


class TestParsing:
    """Test suite for reading preset files."""

    def test_single_preset_with_options(self):
        result = parse_export_presets(ANDROID_PRESET)
        assert len(result.presets) == 1
        preset = result.presets[0]
        assert preset['name'] == 'Android'
        assert preset['platform'] == 'Android'
        assert preset['runnable'] is True
        assert preset['dedicated_server'] is False
        assert preset['options']['package/unique_name'] == \
            'com.example.$genname'
        assert preset['options']['architectures/arm64-v8a'] is True

    def test_multiple_presets(self):
        result = parse_export_presets(TWO_PRESETS)
        assert [i['name'] for i in result.presets] == ['Android', 'iOS']
        assert result.presets[1]['options'] == {
            'application/identifier': 'com.example.ios'}

    def test_missing_options_section(self):
        result = parse_export_presets(
            '[preset.0]\n\nname="Android"\nplatform="Android"\nrunnable=true\n')
        assert 'options' not in result.presets[0]

    def test_sorted_by_index(self):
        result = parse_export_presets(
            '[preset.10]\nname="C"\n[preset.2]\nname="B"\n[preset.0]\nname="A"\n')
        assert [i['name'] for i in result.presets] == ['A', 'B', 'C']

    def test_missing_required_fields_are_defaulted(self):
        preset = parse_export_presets('[preset.0]\nexport_path="a.apk"\n') \
            .presets[0]
        assert preset == {
            'name': '', 'platform': '', 'runnable': False,
            'export_path': 'a.apk'}

    def test_other_sections_are_ignored(self):
        result = parse_export_presets(
            'x=1\n[application]\nname="no"\n[preset.0]\nname="yes"\n')
        assert [i['name'] for i in result.presets] == ['yes']

    def test_invalid_preset_section_warns(self):
        with pytest.warns(UserWarning, match='preset.abc'):
            result = parse_export_presets(
                '[preset.abc]\nname="?"\n[preset.0]\nname="A"\n')
        assert len(result.presets) == 1

    def test_options_key_in_preset_section_warns(self):
        with pytest.warns(UserWarning, match='options'):
            result = parse_export_presets(
                '[preset.0]\nname="A"\noptions="stray"\n')
        assert 'options' not in result.presets[0]

    def test_invalid_file_format(self):
        content = ('[preset.0]\nname="Android"\n[preset.0.options\n'
                   'package/unique_name="com.example"\n')
        with pytest.raises(ParseError) as e:
            parse_export_presets(content)
        assert e.value.line == 3

    def test_presets_do_not_share_with_config(self):
        config = ConfigFile()
        config.set_value('preset.0', 'name', 'Android')
        config.set_value('preset.0.options', 'tags', PackedStringArray(['a']))
        preset = presets_from_config(config).presets[0]
        preset['options']['tags'].append('b')
        assert config.get_value('preset.0.options', 'tags') == ['a']


class TestWriting:
    """Test suite for writing preset files."""

    def test_godot_layout(self):
        text = serialize_export_presets(parse_export_presets(TWO_PRESETS))
        assert text == TWO_PRESETS

    def test_single_preset(self):
        presets = ExportPresetsFile([ExportPreset(
            name='Android', platform='Android', runnable=True,
            dedicated_server=False, options={
                'package/unique_name': 'com.example',
                'architectures/arm64-v8a': True})])
        parsed = parse_export_presets(serialize_export_presets(presets))
        assert len(parsed.presets) == 1
        assert parsed.presets[0]['name'] == 'Android'
        assert parsed.presets[0]['options']['package/unique_name'] == \
            'com.example'

    def test_round_trip(self):
        original = ExportPreset(
            name='Android', platform='Android', runnable=True,
            export_path='game.apk', options={
                'package/unique_name': 'com.example',
                'architectures/arm64-v8a': True})
        content = serialize_export_presets(ExportPresetsFile([original]))
        assert parse_export_presets(content).presets[0] == original

    def test_renumbered_by_list_order(self):
        config = presets_to_config(ExportPresetsFile([
            ExportPreset(name='A', platform='Web', runnable=False),
            ExportPreset(name='B', platform='Web', runnable=False,
                         options={'vram_texture_compression/for_mobile': True}),
        ]))
        assert config.get_sections() == [
            'preset.0', 'preset.1', 'preset.1.options']

    def test_empty_options_not_written(self):
        config = presets_to_config(ExportPresetsFile([
            ExportPreset(name='A', platform='Web', runnable=False, options={})]))
        assert config.get_sections() == ['preset.0']

    def test_empty_file(self):
        assert parse_export_presets(
            serialize_export_presets(ExportPresetsFile())).presets == []


class TestAccessors:
    """Test suite for index/criteria lookups and copy-on-write edits."""

    def test_get_preset(self, presets):
        assert get_preset(presets, 0)['name'] == 'Android'
        assert get_preset(presets, 1)['name'] == 'iOS'
        assert get_preset(presets, 2) is None
        assert get_preset(presets, -1) is None

    def test_find_by_platform(self, presets):
        assert find_preset(presets, platform='android')['name'] == 'Android'
        assert find_preset(presets, platform='ANDROID')['name'] == 'Android'
        assert find_preset(presets, platform=' iOS ')['name'] == 'iOS'
        assert find_preset(presets, platform='Linux') is None

    def test_find_by_name_or_index(self, presets):
        assert find_preset(presets, name='ios')['platform'] == 'iOS'
        assert find_preset(presets, index=1)['name'] == 'iOS'
        assert find_preset(presets, index=5) is None
        assert find_preset(presets) is None

    def test_index_wins(self, presets):
        assert find_preset(presets, platform='iOS', index=0)['name'] == \
            'Android'

    def test_first_match_wins(self):
        presets = ExportPresetsFile([
            ExportPreset(name='Debug', platform='Android', runnable=True),
            ExportPreset(name='Android', platform='Web', runnable=True),
        ])
        assert find_preset(presets, name='Android', platform='Android')[
            'name'] == 'Debug'
        assert find_preset(presets, name='android')['platform'] == 'Web'

    def test_set_preset_appends(self):
        empty = ExportPresetsFile()
        updated = set_preset(empty, ExportPreset(
            name='Android', platform='Android', runnable=True))
        assert len(updated.presets) == 1
        assert empty.presets == []

    def test_set_preset_replaces(self, presets):
        updated = set_preset(presets, ExportPreset(
            name='Android', platform='Android', runnable=False,
            export_path='game.apk'), 0)
        assert len(updated.presets) == 2
        assert updated.presets[0]['runnable'] is False
        assert updated.presets[0]['export_path'] == 'game.apk'
        assert presets.presets[0]['runnable'] is True

    def test_set_preset_out_of_range_appends(self, presets):
        updated = set_preset(presets, ExportPreset(
            name='Web', platform='Web', runnable=False), 9)
        assert [i['name'] for i in updated.presets] == [
            'Android', 'iOS', 'Web']

    def test_remove_preset(self, presets):
        updated = remove_preset(presets, 0)
        assert [i['name'] for i in updated.presets] == ['iOS']
        assert len(presets.presets) == 2
        assert remove_preset(presets, 7) is presets


class TestFiles:
    """Test suite for loading and saving preset files."""

    def test_save_then_load(self, tmp_path):
        path = str(tmp_path / 'export_presets.cfg')
        presets = ExportPresetsFile([ExportPreset(
            name='Android', platform='Android', runnable=True,
            options={'package/unique_name': 'com.example'})])
        save_export_presets(path, presets)
        loaded = load_export_presets(path)
        assert len(loaded.presets) == 1
        assert loaded.presets[0]['name'] == 'Android'
        assert loaded == presets

    def test_load_malformed(self, tmp_path):
        path = tmp_path / 'export_presets.cfg'
        path.write_text('[preset.0\nname="A"\n', encoding='utf-8')
        with pytest.raises(ParseError):
            load_export_presets(str(path))

    def test_load_missing(self, tmp_path):
        with pytest.raises(OSError):
            load_export_presets(str(tmp_path / 'nope.cfg'))
