"""HUD and message banner"""

from __future__ import annotations

import pygame

from zombie_shooter.constants import (
    HUD_PADDING, TEXT_COLOR, FONT_NAME, FONT_SIZE_SMALL, SCORE_POPUP_COLOR, SCORE_POPUP_MS
)


class HUD:
    """Heads-Up Display: score on the left, status flags on the right."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)
        self.score = 0
        self.last_delta = 0
        self.delta_expires_at: int | None = None
        self._delta_pending = False

    def update_fonts(self, new_font: pygame.font.Font) -> None:
        """Update fonts for responsive scaling."""
        self.font = new_font

    def on_score(self, delta: int, total: int) -> None:
        self.score = total
        self.last_delta = delta
        self.delta_expires_at = None
        self._delta_pending = delta > 0

    def update(self, now_ms: int) -> None:
        """Anchor and expire the "+N" popup shown after a hit."""
        if self._delta_pending:
            self.delta_expires_at = now_ms + SCORE_POPUP_MS
            self._delta_pending = False
        if self.delta_expires_at is not None and now_ms >= self.delta_expires_at:
            self.last_delta = 0
            self.delta_expires_at = None

    @property
    def delta_label(self) -> str:
        return f"+{self.last_delta}" if self.last_delta > 0 else ""

    def draw(self, surf: pygame.Surface, show_fps: bool = False, fps: float = 0.0,
             muted: bool = False, show_hitboxes: bool = False) -> None:
        """Render the score and status indicators."""
        current_width = surf.get_width()
        current_height = surf.get_height()
        responsive_padding = max(8, int(HUD_PADDING * (min(current_width, current_height) / 540)))

        # LEFT SIDE: Score, with the last hit's points next to it
        score_text = self.font.render(f"Score: {self.score}", True, TEXT_COLOR)
        surf.blit(score_text, (responsive_padding, responsive_padding))
        if self.delta_label:
            delta_text = self.font.render(self.delta_label, True, SCORE_POPUP_COLOR)
            surf.blit(delta_text, (responsive_padding * 2 + score_text.get_width(), responsive_padding))

        # RIGHT SIDE: optional indicators
        indicators = []
        if show_fps:
            fps_color = (0, 255, 0) if fps >= 55 else (255, 255, 0) if fps >= 30 else (255, 0, 0)
            indicators.append((f"FPS: {fps:.1f}", fps_color))
        if muted:
            indicators.append(("MUTED", (255, 150, 150)))
        if show_hitboxes:
            indicators.append(("HITBOXES", (150, 255, 150)))

        right_y = responsive_padding
        for text, color in indicators:
            text_surf = self.small_font.render(text, True, color)
            surf.blit(text_surf, (current_width - text_surf.get_width() - responsive_padding, right_y))
            right_y += text_surf.get_height() + 4


class MessageBanner:
    """
    Centered status message.

    `show(text, duration_ms)` replaces the current message; a duration of 0
    or less keeps it until the next call, and empty text hides the banner.
    """

    def __init__(self, font: pygame.font.Font | None = None) -> None:
        self.font = font
        self.text = ""
        self.expires_at: int | None = None
        self._pending_duration: int | None = None

    @property
    def visible(self) -> bool:
        return bool(self.text)

    def update_fonts(self, new_font: pygame.font.Font) -> None:
        self.font = new_font

    def show(self, text: str, duration_ms: int = 0) -> None:
        self.text = text
        self.expires_at = None
        # expiry is anchored on the next update() so the banner needs no clock of its own
        self._pending_duration = duration_ms if text and duration_ms > 0 else None

    def update(self, now_ms: int) -> None:
        if self._pending_duration is not None:
            self.expires_at = now_ms + self._pending_duration
            self._pending_duration = None
        if self.expires_at is not None and now_ms >= self.expires_at:
            self.text = ""
            self.expires_at = None

    def draw(self, surf: pygame.Surface) -> None:
        if not self.visible or self.font is None:
            return
        text_surf = self.font.render(self.text, True, (255, 255, 100))
        text_rect = text_surf.get_rect(center=(surf.get_width() // 2, surf.get_height() // 2))
        bg_rect = text_rect.inflate(40, 20)
        bg_surf = pygame.Surface(bg_rect.size, pygame.SRCALPHA)
        bg_surf.fill((0, 0, 0, 160))
        surf.blit(bg_surf, bg_rect)
        surf.blit(text_surf, text_rect)
