"""Score counter and the start / game-over cards drawn over the play field."""

from __future__ import annotations

import pygame

from .config import (
    CARD_WIDTH,
    COLOR_SENAC_BLUE,
    COLOR_SENAC_ORANGE,
    GAME_HEIGHT,
    GAME_WIDTH,
    RESTART_BUTTON_RECT,
)
from .simulation import Phase
from .utils import hex_to_rgb

WHITE = (255, 255, 255)
TEXT_DARK = (31, 41, 55)
TEXT_MUTED = (107, 114, 128)
ORANGE_SOFT = (255, 237, 213)
BLUE_SOFT = (239, 246, 255)
ORANGE_DARK = (234, 88, 12)


class Hud:
    def __init__(self, size: tuple[int, int] = (GAME_WIDTH, GAME_HEIGHT)) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.width, self.height = size
        self.blue = hex_to_rgb(COLOR_SENAC_BLUE)
        self.orange = hex_to_rgb(COLOR_SENAC_ORANGE)
        self.font_score = pygame.font.SysFont(None, 72, bold=True)
        self.font_title = pygame.font.SysFont(None, 40, bold=True)
        self.font_body = pygame.font.SysFont(None, 22)
        self.font_small = pygame.font.SysFont(None, 18, bold=True)
        self.dim_start = self._make_dim(102)
        self.dim_game_over = self._make_dim(153)
        self.restart_rect = pygame.Rect(RESTART_BUTTON_RECT)

    def _make_dim(self, alpha: int) -> pygame.Surface:
        s = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        s.fill((0, 0, 0, alpha))
        return s

    def _blit_centered(self, surf: pygame.Surface, font: pygame.font.Font, text: str, color, center) -> None:
        img = font.render(text, True, color)
        surf.blit(img, img.get_rect(center=center))

    def draw_score(self, surf: pygame.Surface, score: int) -> None:
        text = str(score)
        center = (self.width // 2, 56)
        # Outline by stamping the text in brand blue around the white fill
        outline = self.font_score.render(text, True, self.blue)
        for dx, dy in ((-2, 0), (2, 0), (0, -2), (0, 2), (-2, -2), (2, -2), (-2, 2), (2, 2)):
            surf.blit(outline, outline.get_rect(center=(center[0] + dx, center[1] + dy)))
        fill = self.font_score.render(text, True, WHITE)
        surf.blit(fill, fill.get_rect(center=center))

    def draw_start(self, surf: pygame.Surface) -> None:
        surf.blit(self.dim_start, (0, 0))
        card = pygame.Rect(0, 0, CARD_WIDTH, 210)
        card.center = (self.width // 2, self.height // 2)
        pygame.draw.rect(surf, WHITE, card, border_radius=16)

        # Play badge
        badge_center = (card.centerx, card.top + 44)
        pygame.draw.circle(surf, (219, 234, 254), badge_center, 28)
        pygame.draw.polygon(
            surf,
            self.blue,
            [
                (badge_center[0] - 8, badge_center[1] - 12),
                (badge_center[0] - 8, badge_center[1] + 12),
                (badge_center[0] + 12, badge_center[1]),
            ],
        )
        self._blit_centered(surf, self.font_title, "Pronto para Voar?", TEXT_DARK, (card.centerx, card.top + 100))
        self._blit_centered(
            surf,
            self.font_body,
            "Toque, clique ou use Espaço para pular.",
            TEXT_MUTED,
            (card.centerx, card.top + 136),
        )
        pill = pygame.Rect(0, 0, 180, 26)
        pill.center = (card.centerx, card.top + 176)
        pygame.draw.rect(surf, ORANGE_SOFT, pill, border_radius=13)
        self._blit_centered(surf, self.font_small, "CLIQUE PARA COMEÇAR", ORANGE_DARK, pill.center)

    def draw_game_over(self, surf: pygame.Surface, score: int, best_score: int) -> None:
        surf.blit(self.dim_game_over, (0, 0))
        card = pygame.Rect(0, 0, CARD_WIDTH, 280)
        card.midbottom = (self.width // 2, self.restart_rect.bottom + 22)
        pygame.draw.rect(surf, WHITE, card, border_radius=24)
        pygame.draw.rect(surf, self.orange, card, width=4, border_radius=24)

        self._blit_centered(surf, self.font_title, "FIM DE JOGO!", TEXT_DARK, (card.centerx, card.top + 40))

        box_w, box_h = 125, 72
        gap = card.width - 2 * 20 - 2 * box_w
        for i, (label, value, bg, fg) in enumerate(
            (
                ("SCORE", score, BLUE_SOFT, self.blue),
                ("MELHOR", best_score, ORANGE_SOFT, ORANGE_DARK),
            )
        ):
            box = pygame.Rect(card.left + 20 + i * (box_w + gap), card.top + 78, box_w, box_h)
            pygame.draw.rect(surf, bg, box, border_radius=12)
            self._blit_centered(surf, self.font_small, label, fg, (box.centerx, box.top + 18))
            self._blit_centered(surf, self.font_title, str(value), fg, (box.centerx, box.top + 48))

        pygame.draw.rect(surf, self.blue, self.restart_rect, border_radius=12)
        self._blit_centered(surf, self.font_body, "Tentar Novamente", WHITE, self.restart_rect.center)

    def draw(self, surf: pygame.Surface, phase: Phase, score: int, best_score: int) -> None:
        self.draw_score(surf, score)
        if phase is Phase.START:
            self.draw_start(surf)
        elif phase is Phase.GAME_OVER:
            self.draw_game_over(surf, score, best_score)
