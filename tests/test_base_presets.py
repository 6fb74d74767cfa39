"""Tests for the bundled default presets."""

import pytest

from pygodotcfg.cfg import PackedStringArray, parse_document
from pygodotcfg.presets import (
    ExportPresetsFile,
    get_base_preset,
    get_base_preset_android_v3,
    get_base_preset_android_v4,
    get_base_preset_ios_v3,
    get_base_preset_ios_v4,
    get_major_version,
    has_base_preset,
    parse_export_presets,
    serialize_export_presets,
)

ALL_BASES = [('Android', 3), ('Android', 4), ('iOS', 3), ('iOS', 4)]


class TestMajorVersion:
    """Test suite for `get_major_version()`."""

    @pytest.mark.parametrize('version, expected', [
        ('4.3.2', 4), ('3.5.1', 3), ('4.0.0', 4), ('3.5', 3),
        ('4', 4), ('v4.2.stable', 4), (' 3.6 ', 3),
    ])
    def test_valid(self, version, expected):
        assert get_major_version(version) == expected

    @pytest.mark.parametrize('version', ['invalid', '', 'four'])
    def test_invalid(self, version):
        with pytest.raises(ValueError, match='Invalid'):
            get_major_version(version)

    @pytest.mark.parametrize('version', ['5.0.0', '2.0.0'])
    def test_unsupported(self, version):
        with pytest.raises(ValueError, match='Unsupported'):
            get_major_version(version)


class TestBasePresets:
    """Test suite for looking up and loading templates."""

    @pytest.mark.parametrize('platform, major', ALL_BASES)
    def test_supported(self, platform, major):
        assert has_base_preset(platform, major)
        preset = get_base_preset(platform, major)
        assert preset['name'] == platform
        assert preset['platform'] == platform
        assert preset['runnable'] is True
        assert isinstance(preset['options'], dict)

    @pytest.mark.parametrize('platform, major', [
        ('Linux', 4), ('android', 4), ('Android', 5), ('iOS', 2)])
    def test_unsupported(self, platform, major):
        assert not has_base_preset(platform, major)
        with pytest.raises(ValueError):
            get_base_preset(platform, major)

    def test_fresh_copy(self):
        first = get_base_preset('Android', 4)
        first['options']['package/name'] = 'Edited'
        first['options']['permissions/custom_permissions'].append('x')
        second = get_base_preset('Android', 4)
        assert second['options']['package/name'] == ''
        assert second['options']['permissions/custom_permissions'] == []

    @pytest.mark.parametrize('platform, major', ALL_BASES)
    def test_survives_file_round_trip(self, platform, major):
        presets = ExportPresetsFile([get_base_preset(platform, major)])
        text = serialize_export_presets(presets)
        assert parse_document(text).error is None
        assert parse_export_presets(text) == presets


class TestAndroid:
    """Test suite for the Android templates."""

    def test_v3(self):
        preset = get_base_preset_android_v3()
        assert preset['script_export_mode'] == 1
        options = preset['options']
        assert options['custom_build/use_custom_build'] is True
        assert options['architectures/arm64-v8a'] is True
        permissions = options['permissions/custom_permissions']
        assert isinstance(permissions, PackedStringArray)
        assert permissions.alias == 'PoolStringArray'

    def test_v4(self):
        preset = get_base_preset_android_v4()
        assert preset['script_export_mode'] == 2
        options = preset['options']
        assert options['gradle_build/use_gradle_build'] is True
        assert options['architectures/arm64-v8a'] is True
        assert options['permissions/custom_permissions'].alias == \
            'PackedStringArray'

    @pytest.mark.parametrize('getter', [
        get_base_preset_android_v3, get_base_preset_android_v4])
    def test_blank_icons(self, getter):
        options = getter()['options']
        assert options['launcher_icons/main_192x192'] == ''
        assert options['launcher_icons/adaptive_foreground_432x432'] == ''
        assert options['launcher_icons/adaptive_background_432x432'] == ''


class TestIOS:
    """Test suite for the iOS templates."""

    def test_v3(self):
        preset = get_base_preset_ios_v3()
        assert preset['script_export_mode'] == 1
        assert preset['options']['architectures/arm64'] is True
        assert preset['options']['application/icon_interpolation'] == 4

    def test_v4(self):
        preset = get_base_preset_ios_v4()
        assert preset['name'] == 'iOS'
        assert preset['options']['architectures/arm64'] is True
        assert preset['options']['application/icon_interpolation'] == '4'

    @pytest.mark.parametrize('getter, icons', [
        (get_base_preset_ios_v3, [
            'app_store_1024x1024', 'ipad_152x152',
            'iphone_120x120', 'spotlight_40x40']),
        (get_base_preset_ios_v4, [
            'app_store_1024x1024', 'ipad_152x152', 'iphone_120x120',
            'notification_40x40', 'settings_58x58', 'spotlight_40x40']),
    ])
    def test_blank_icons(self, getter, icons):
        options = getter()['options']
        for i in icons:
            assert options[f'icons/{i}'] == '', i
