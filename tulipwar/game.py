"""The game window, its main loop and the keyboard controls."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

from tulipwar.ai import AI
from tulipwar.events import Events
from tulipwar.pics import Pics
from tulipwar.text import Text

TITLE = "War of the Tulips"
WIDTH = 1000
HEIGHT = 1000
FRAME_MS = 1000 // 60


class Game:
    """Owns the window and runs the match."""

    def __init__(self, title: str, width: int, height: int) -> None:
        self.sc_wdth = width
        self.sc_hth = height

        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)

        self.ev = Events(Pics(), Text())
        self.ai = AI(Pics())

        self.game_running = True
        self.count = 0
        self.selection = 0
        self.frame_count = 0
        self.last_frame = pygame.time.get_ticks()
        self._last_time = 0

        self.team = True
        self.event = 0
        self.bee_score = 0
        self.wasp_score = 0

        self.paddle_speed = height // 16
        self.player_paddle_y = height // 2 - height // 8
        self.tmp_player_paddle_y = 0
        self.bee_paddle_y = 0
        self.wasp_paddle_y = 0
        self.ball_x = 0
        self.ball_y = 0

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        pygame.quit()

    def loop(self) -> None:
        while self.game_running:
            self.last_frame = pygame.time.get_ticks()
            if self.last_frame >= self._last_time + 1000:
                self._last_time = self.last_frame
                self.frame_count = 0

            self.render()
            self.handle_input()
            self.update()

            if self.event > 3:
                self.game_running = False

    def render(self) -> None:
        """Draw one frame and hold the frame rate near 60 per second."""
        self.ev.set_screen_parameters(self.sc_hth, self.sc_wdth)
        self.ai.get_params(
            self.sc_hth,
            self.sc_wdth,
            self.paddle_speed,
            self.team,
            self.event,
            self.bee_paddle_y,
            self.wasp_paddle_y,
        )

        self.screen.fill((0, 0, 0))
        self.ev.pics.create_background(self.screen)
        self.ev.pics.install_tulips(self.screen)
        self.ev.call_text(self.screen, self.event)
        self.ev.show_point(self.screen, self.event, self.bee_score, self.wasp_score)
        self.ai.play_ball(self.screen, self.ball_x, self.ball_y, self.player_paddle_y)
        pygame.display.flip()

        self.frame_count += 1
        elapsed = pygame.time.get_ticks() - self.last_frame
        if elapsed < FRAME_MS:
            pygame.time.delay(FRAME_MS - elapsed)

    def handle_input(self) -> None:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self.game_running = False
            elif e.type == pygame.KEYDOWN:
                self._key(e.key)

    def _key(self, key: int) -> None:
        if key in (pygame.K_ESCAPE, pygame.K_n):
            self.game_running = False
        elif key == pygame.K_f:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            self.sc_wdth, self.sc_hth = self.screen.get_size()
        elif key == pygame.K_SPACE:
            self.event += 1
        elif key == pygame.K_w:
            self.team = False
            self.event += 1
        elif key == pygame.K_b:
            self.team = True
            self.event += 1
        elif key == pygame.K_y:
            if self.event == 3:
                self.event = 0
                self.bee_score = 0
                self.wasp_score = 0
                self.selection = 0
                self.team = False
            else:
                self.event += 1
        elif key == pygame.K_UP:
            self.tmp_player_paddle_y = -self.paddle_speed
        elif key == pygame.K_DOWN:
            self.tmp_player_paddle_y = self.paddle_speed

    def update(self) -> None:
        """Take the positions from the last frame, score points and check for the end of the match."""
        if self.event - self.selection >= 2:
            self.event -= 1

        (
            self.bee_paddle_y,
            self.wasp_paddle_y,
            player_y,
            self.ball_x,
            self.ball_y,
        ) = self.ai.paddle_ball_loc
        self.player_paddle_y = player_y + self.tmp_player_paddle_y

        self.selection = self.event

        self.bee_score, self.wasp_score = self.ev.call_point(self.bee_score, self.wasp_score, self.ball_x)
        self.event = self.ev.call_end_game(self.bee_score, self.wasp_score, self.event)


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(prog="tulipwar", description=TITLE).parse_args(argv)
    with Game(TITLE, WIDTH, HEIGHT) as game:
        game.loop()
    return 0