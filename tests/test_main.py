"""Tests for command line handling."""

import os

import pygame
import pytest

import main
from game.config import ConfigError


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    """Run from an empty directory with no CLAW_* variables."""
    for name in list(os.environ):
        if name.startswith('CLAW_'):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


class TestBuildSettings:
    """Tests for merging command line flags into settings."""

    def test_no_flags_uses_defaults(self):
        settings = main.build_settings(main.parse_args([]))

        assert settings.balloon_count == 10
        assert settings.audio_enabled is True

    def test_flags_override_environment(self, monkeypatch):
        monkeypatch.setenv('CLAW_BALLOON_COUNT', '4')

        args = main.parse_args([
            '--screen', '1024x768', '--balloons', '6', '--mute',
            '--fullscreen', '--log-level', 'warning',
        ])
        settings = main.build_settings(args)

        assert (settings.screen_width, settings.screen_height) == (1024, 768)
        assert settings.balloon_count == 6
        assert settings.audio_enabled is False
        assert settings.fullscreen is True
        assert settings.log_level == 'WARNING'

    def test_bad_screen_flag(self):
        with pytest.raises(ConfigError):
            main.build_settings(main.parse_args(['--screen', 'big']))

    def test_negative_balloons_flag(self):
        with pytest.raises(ConfigError):
            main.build_settings(main.parse_args(['--balloons', '-3']))

    def test_flag_replaces_bad_environment_value(self, monkeypatch):
        monkeypatch.setenv('CLAW_BALLOON_COUNT', '-1')

        settings = main.build_settings(main.parse_args(['--balloons', '5']))

        assert settings.balloon_count == 5

    def test_bad_environment_value_without_flag(self, monkeypatch):
        monkeypatch.setenv('CLAW_BALLOON_COUNT', '-1')

        with pytest.raises(ConfigError):
            main.build_settings(main.parse_args([]))


class TestWindowEvents:
    """Tests for reading window events."""

    def test_videoresize_size(self):
        event = pygame.event.Event(pygame.VIDEORESIZE, w=800, h=600, size=(800, 600))

        assert main.window_size(event) == (800, 600)

    def test_window_size_changed_size(self):
        event = pygame.event.Event(pygame.WINDOWSIZECHANGED, x=640, y=960)

        assert main.window_size(event) == (640, 960)

    def test_both_resize_events_handled(self):
        assert pygame.VIDEORESIZE in main.RESIZE_EVENTS
        assert pygame.WINDOWSIZECHANGED in main.RESIZE_EVENTS

    def test_volume_keys(self):
        assert main.VOLUME_KEYS[pygame.K_EQUALS] > 0
        assert main.VOLUME_KEYS[pygame.K_KP_PLUS] > 0
        assert main.VOLUME_KEYS[pygame.K_MINUS] < 0


def test_main_reports_config_error(capsys):
    assert main.main(['--screen', '0x0']) == 2
    assert 'screen size must be positive' in capsys.readouterr().err
