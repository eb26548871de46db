import pygame
from pygame.event import Event

from othello.engine.geometry import Square
from othello.engine.piece import Piece
from othello.mode.game import GameMode

BOARD_WIDTH_PX = 600
BOARD_HEIGHT_PX = 600
STATUS_HEIGHT_PX = 40

FONT_SIZE = 32

COLOR_WHITE_DISC = (255, 255, 255)
COLOR_BLACK_DISC = (0, 0, 0)
COLOR_BACKGROUND = (0, 128, 0)
COLOR_GRID_LINE = (0, 96, 0)
COLOR_STATUS_BACKGROUND = (96, 96, 96)

FRAME_RATE = 60


class NonMoveEvent(Exception):
    pass


class Window:
    def __init__(self, size: int, human_color: Piece, depth: int) -> None:
        pygame.init()

        self.size = size
        self.square_size = BOARD_WIDTH_PX // size
        self.disc_radius = self.square_size // 2 - 5
        self.move_indicator_radius = self.square_size // 8

        self.mode = GameMode(size, human_color, depth)

        self.screen = pygame.display.set_mode(
            (BOARD_WIDTH_PX, BOARD_HEIGHT_PX + STATUS_HEIGHT_PX)
        )
        self.clock = pygame.time.Clock()

        pygame.display.set_caption("Othello")

    def run(self) -> None:
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break

                try:
                    square = self.get_square_from_event(event)
                except NonMoveEvent:
                    self.mode.on_event(event)
                else:
                    self.mode.on_move(square)

            self.draw()
            self.mode.on_frame()
            self.clock.tick(FRAME_RATE)

        pygame.quit()

    def get_board_square_center(self, square: Square) -> tuple[int, int]:
        x = square.x * self.square_size + self.square_size // 2
        y = square.y * self.square_size + self.square_size // 2
        return (x, y)

    def draw_disc(self, square: Square, color: tuple[int, int, int]) -> None:
        center = self.get_board_square_center(square)
        pygame.draw.circle(self.screen, color, center, self.disc_radius)

    def draw_move_indicator(self, square: Square, color: tuple[int, int, int]) -> None:
        center = self.get_board_square_center(square)
        pygame.draw.circle(self.screen, color, center, self.move_indicator_radius)

    def draw_grid(self) -> None:
        for i in range(1, self.size):
            offset = i * self.square_size
            pygame.draw.line(
                self.screen, COLOR_GRID_LINE, (offset, 0), (offset, BOARD_HEIGHT_PX)
            )
            pygame.draw.line(
                self.screen, COLOR_GRID_LINE, (0, offset), (BOARD_WIDTH_PX, offset)
            )

    def draw_status(self, black: int, white: int, game_end: bool) -> None:
        pygame.draw.rect(
            self.screen,
            COLOR_STATUS_BACKGROUND,
            ((0, BOARD_HEIGHT_PX), (BOARD_WIDTH_PX, STATUS_HEIGHT_PX)),
        )

        text = f"Black {black} - {white} White"
        if game_end:
            text += "  (click to restart)"

        font = pygame.font.Font(None, FONT_SIZE)
        text_surface = font.render(text, True, COLOR_WHITE_DISC)
        text_rect = text_surface.get_rect()
        text_rect.center = (BOARD_WIDTH_PX // 2, BOARD_HEIGHT_PX + STATUS_HEIGHT_PX // 2)
        self.screen.blit(text_surface, text_rect.topleft)

    def draw(self) -> None:
        board = self.mode.get_board()

        ui_details = self.mode.get_ui_details()
        valid_moves: set[Square] = ui_details.pop("valid_moves", set())
        black, white = ui_details.pop("score")
        game_end: bool = ui_details.pop("game_end")

        if ui_details:
            print(
                "WARNING: found unused ui details key(s): "
                + ", ".join(sorted(ui_details))
            )

        if self.mode.get_turn() == Piece.WHITE:
            turn_color = COLOR_WHITE_DISC
        else:
            turn_color = COLOR_BLACK_DISC

        self.screen.fill(COLOR_BACKGROUND)
        self.draw_grid()

        for square in board.squares():
            cell = board.get_square(square)

            if cell == Piece.WHITE:
                self.draw_disc(square, COLOR_WHITE_DISC)
            elif cell == Piece.BLACK:
                self.draw_disc(square, COLOR_BLACK_DISC)
            elif square in valid_moves:
                self.draw_move_indicator(square, turn_color)

        self.draw_status(black, white, game_end)

        pygame.display.flip()

    def get_square_from_event(self, event: Event) -> Square:
        if event.type != pygame.MOUSEBUTTONDOWN:
            raise NonMoveEvent

        if event.button != pygame.BUTTON_LEFT:
            raise NonMoveEvent

        x, y = event.pos
        col: int = x // self.square_size
        row: int = y // self.square_size

        if not (row in range(self.size) and col in range(self.size)):
            raise NonMoveEvent

        return Square(col, row)
