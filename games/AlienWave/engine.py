"""
Main game engine for Alien Waves.

Owns the pygame display and frame clock and drives a GameSession once per
frame: handle events, update, render. Everything that decides gameplay
lives in the session; this module only translates devices to actions and
draws the result.
"""

from pathlib import Path
from typing import Optional, Union

import pygame

import games.AlienWave.config as config
from models import GameConfig, InputAction, Resolution, SessionMode, WaveOutcome
from games.AlienWave.config import Colors, Fonts
from games.AlienWave.game.scheduler import monotonic_ms
from games.AlienWave.game.session import GameSession
from games.AlienWave.input.input_manager import InputManager
from wavecore.logging import get_logger

log = get_logger('engine')

KEY_ACTIONS = {
    pygame.K_RETURN: InputAction.START,
    pygame.K_ESCAPE: InputAction.TOGGLE_PAUSE,
    pygame.K_r: InputAction.RESTART,
    pygame.K_SPACE: InputAction.CONTINUE_WAVE,
}


class GameEngine:
    """Main game engine managing the game loop and pygame state.

    Attributes:
        screen: Pygame display surface
        clock: Pygame clock for frame timing
        running: Whether the game loop should continue
        session: The GameSession being played
        input_manager: Routes mouse input to the session
        sprite_sheet: Alien sprite sheet, None to draw tinted squares

    Examples:
        >>> engine = GameEngine(GameConfig())  # doctest: +SKIP
        >>> engine.run()  # doctest: +SKIP
    """

    def __init__(
        self,
        game_config: GameConfig,
        resolution: Optional[Resolution] = None,
        sprite_sheet_path: Optional[Union[str, Path]] = None,
    ):
        pygame.init()

        if resolution is None:
            resolution = Resolution(width=config.SCREEN_WIDTH, height=config.SCREEN_HEIGHT)
        self.resolution = resolution
        self.screen = pygame.display.set_mode((resolution.width, resolution.height))
        pygame.display.set_caption(game_config.name)
        pygame.mouse.set_visible(False)

        self.clock = pygame.time.Clock()
        self.running = True

        self.session = GameSession(game_config, resolution, clock=monotonic_ms)
        self.input_manager = InputManager(self.session)
        self.sprite_sheet = _load_sprite_sheet(sprite_sheet_path)

        compact = resolution.width < config.MOBILE_WIDTH_THRESHOLD
        self._hud_font = _load_font(Fonts.SMALL if compact else Fonts.MEDIUM)
        self._message_font = _load_font(Fonts.MEDIUM if compact else Fonts.LARGE)

    # ------------------------------------------------------------------
    # Input

    def handle_events(self) -> None:
        """Process quit and keyboard events, then pointer input."""
        for event in pygame.event.get((pygame.QUIT, pygame.KEYDOWN)):
            if event.type == pygame.QUIT:
                self.running = False
                return
            action = KEY_ACTIONS.get(event.key)
            if action is not None:
                self.session.handle_action(action)

        self.input_manager.process(monotonic_ms())

        # Drop window and other events nobody consumes
        pygame.event.clear()

    # ------------------------------------------------------------------
    # Update / render

    def update(self, now: Optional[float] = None) -> None:
        """Advance the session by one tick."""
        self.session.update(monotonic_ms() if now is None else now)

    def render(self, now: Optional[float] = None) -> None:
        """Draw targets, crosshair, HUD and messages, then flip."""
        now = monotonic_ms() if now is None else now
        self.screen.fill(Colors.BACKGROUND)

        # Fades stay frozen while paused
        target_now = self.session.wave.render_now(now)
        for target in self.session.wave.targets:
            target.render(self.screen, target_now, self.sprite_sheet)

        if self.session.is_playing:
            self._render_crosshair(now)

        if self.session.mode in (SessionMode.PLAYING, SessionMode.PAUSED):
            self._render_hud(now)
        self._render_message()

        pygame.display.flip()

    def _render_crosshair(self, now: float) -> None:
        x, y = int(self.session.pointer.x), int(self.session.pointer.y)
        half = config.CROSSHAIR_SIZE // 2
        pygame.draw.circle(self.screen, Colors.WHITE, (x, y), half, 2)
        pygame.draw.line(self.screen, Colors.WHITE, (x - half, y), (x + half, y), 1)
        pygame.draw.line(self.screen, Colors.WHITE, (x, y - half), (x, y + half), 1)

        progress = self.input_manager.shot_progress(now, config.SHOT_RING_DURATION_MS)
        if progress is None:
            return
        radius = max(1, int(progress * config.SHOT_RING_MAX_RADIUS))
        ring = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(ring, (255, 255, 255, int((1 - progress) * 255)), (radius, radius), radius)
        self.screen.blit(ring, (x - radius, y - radius))

    def _render_hud(self, now: float) -> None:
        status = self.session.wave.status(now)
        margin = config.HUD_MARGIN
        line = config.HUD_LINE_HEIGHT

        self._blit_text(f"Wave: {status.wave_number}/{status.total_waves}", Colors.WHITE, (margin, margin + 20))
        self._blit_text(f"Aliens: {status.active_count}", Colors.WHITE, (margin, margin + 20 + line))

        if self.session.mode != SessionMode.PLAYING:
            return

        remaining = status.time_remaining_ms
        if remaining < config.TIME_CRITICAL_MS:
            color = Colors.RED
        elif remaining < config.TIME_WARNING_MS:
            color = Colors.ORANGE
        else:
            color = Colors.WHITE
        self._blit_text(f"Time: {remaining / 1000:.1f}s", color, (margin, margin + 20 + line * 2))

        bar_y = margin + 20 + line * 3
        backdrop = pygame.Surface((config.TIME_BAR_WIDTH, config.TIME_BAR_HEIGHT), pygame.SRCALPHA)
        backdrop.fill((255, 255, 255, 77))
        self.screen.blit(backdrop, (margin, bar_y))

        if status.progress > 0.5:
            bar_color = Colors.GREEN
        elif status.progress > 0.25:
            bar_color = Colors.ORANGE
        else:
            bar_color = Colors.RED
        width = int(config.TIME_BAR_WIDTH * status.progress)
        if width > 0:
            pygame.draw.rect(self.screen, bar_color, (margin, bar_y, width, config.TIME_BAR_HEIGHT))

    def _render_message(self) -> None:
        mode = self.session.mode
        if mode == SessionMode.MENU:
            text, color = "Press Enter or click to start", Colors.WHITE
        elif mode == SessionMode.PAUSED:
            text, color = "GAME PAUSED", Colors.YELLOW
        elif self.session.wave.outcome == WaveOutcome.SUCCEEDED and mode == SessionMode.PLAYING:
            text, color = "Wave Complete! Click to continue", Colors.LIME
        elif mode == SessionMode.OVER:
            text, color = "GAME OVER - click or press R to restart", Colors.RED
        elif mode == SessionMode.VICTORY:
            text, color = "VICTORY! All waves complete!", Colors.GOLD
        else:
            return

        surface = self._message_font.render(text, True, color)
        rect = surface.get_rect(center=(self.resolution.width // 2, self.resolution.height // 2 - 100))
        self.screen.blit(surface, rect)

    def _blit_text(self, text: str, color: tuple, topleft: tuple) -> None:
        surface = self._hud_font.render(text, True, color)
        self.screen.blit(surface, topleft)

    # ------------------------------------------------------------------
    # Loop

    def run(self) -> None:
        """Run the main game loop until the window is closed."""
        log.info("Starting %s at %s", self.session.config.name, self.resolution)
        while self.running:
            self.clock.tick(config.FPS)
            self.handle_events()
            self.update()
            self.render()

    def quit(self) -> None:
        """Shut down pygame subsystems."""
        pygame.quit()


def _load_font(size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(None, size)
    except (OSError, pygame.error):
        return pygame.font.SysFont("monospace", size)


def _load_sprite_sheet(path: Optional[Union[str, Path]]) -> Optional[pygame.Surface]:
    """Load the alien sheet (rows of 2, 3, 3 and 3 frames).

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the image is too small to hold every frame
    """
    if path is None:
        return None
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Sprite sheet not found: {path}")

    sheet = pygame.image.load(str(path)).convert_alpha()
    min_width = config.SPRITE_FRAME_SIZE * 3
    min_height = config.SPRITE_FRAME_SIZE * 4
    if sheet.get_width() < min_width or sheet.get_height() < min_height:
        raise ValueError(
            f"Sprite sheet {path} is {sheet.get_width()}x{sheet.get_height()}, "
            f"needs at least {min_width}x{min_height}"
        )
    log.info("Loaded sprite sheet %s", path)
    return sheet
