"""
Best-effort audio: background music and the gunshot effect.

Nothing here may interrupt the game. A missing mixer, missing files, or a
playback error leaves the game silent and prints a diagnostic once.
"""

from __future__ import annotations

import os

import pygame

from .constants import BGM_VOLUME, MUSIC_PATH, SFX_VOLUME, SHOT_SFX_PATH


class AudioSystem:
    """Plays the soundtrack and shot effect; safe to disable or fail."""

    def __init__(self, enabled: bool = True, muted: bool = False,
                 music_path: str = MUSIC_PATH, shot_path: str = SHOT_SFX_PATH,
                 bgm_volume: float = BGM_VOLUME, sfx_volume: float = SFX_VOLUME) -> None:
        self.enabled = enabled
        self.muted = muted
        self.music_path = music_path
        self.shot_path = shot_path
        self.bgm_volume = bgm_volume
        self.sfx_volume = sfx_volume
        self.music_loaded = False
        self.snd_shot: pygame.mixer.Sound | None = None
        if self.enabled:
            self.init_audio()

    def init_audio(self) -> None:
        """Initialize the mixer and load assets."""
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=22050, size=-16, channels=2, buffer=512)
        except pygame.error as e:
            print(f"Audio disabled, mixer unavailable: {e}")
            self.enabled = False
            return

        if os.path.exists(self.music_path):
            try:
                pygame.mixer.music.load(self.music_path)
                pygame.mixer.music.set_volume(self._music_volume())
                self.music_loaded = True
            except pygame.error as e:
                print(f"Failed to load background music: {e}")
        else:
            print(f"Background music file not found: {self.music_path}")

        if os.path.exists(self.shot_path):
            try:
                self.snd_shot = pygame.mixer.Sound(self.shot_path)
                self.snd_shot.set_volume(self.sfx_volume)
            except pygame.error as e:
                print(f"Failed to load shot sound effect: {e}")
                self.snd_shot = None
        else:
            print(f"Shot sound effect file not found: {self.shot_path}")

    def _music_volume(self) -> float:
        return 0.0 if self.muted else self.bgm_volume

    def play_shot_effect(self) -> None:
        if not self.enabled or self.muted or self.snd_shot is None:
            return
        try:
            # restart the effect on rapid fire
            self.snd_shot.stop()
            self.snd_shot.play()
        except pygame.error:
            pass

    def play_background_music(self) -> None:
        if not self.enabled or not self.music_loaded:
            return
        try:
            pygame.mixer.music.set_volume(self._music_volume())
            if not pygame.mixer.music.get_busy():
                pygame.mixer.music.play(-1)
        except pygame.error:
            pass

    def stop_background_music(self) -> None:
        """Stop and rewind the soundtrack."""
        if not self.enabled or not self.music_loaded:
            return
        try:
            pygame.mixer.music.stop()
            pygame.mixer.music.rewind()
        except pygame.error:
            pass

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        if self.enabled and self.music_loaded:
            try:
                pygame.mixer.music.set_volume(self._music_volume())
            except pygame.error:
                pass
        return self.muted
