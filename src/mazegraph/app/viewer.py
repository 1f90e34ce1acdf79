# src/mazegraph/app/viewer.py
#!/usr/bin/env python3
"""
Maze Search Viewer - Minimal Controls + Metrics

- Keyboard:
    [1]..[9]     -> switch maze
    [D]/[B]      -> select algorithm (DFS / BFS)
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit

Usage:
    mazegraph-viewer                 # bundled mazes
    mazegraph-viewer a.txt b.txt     # your own
"""

import sys, time
from collections import Counter
from pathlib import Path
from typing import List, Tuple, Optional, Dict

import pygame

from mazegraph.config import bundled_mazes
from mazegraph.core.errors import MazeError
from mazegraph.core.maze import build_search_input, parse_maze, read_maze
from mazegraph.core.search import BFSAlgo, DFSAlgo, FrontierSearch
from mazegraph.core.types import MazeGrid, NodeId, ParsedMaze, Position, SearchInput

# ---------- Config ----------
PANEL_W = 360            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 24
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
WALL_GRAY   = ( 52, 56, 64)
FLOOR_GRAY  = (200,200,200)
NEON_CYAN_A = (0,150,255,110)
NEON_MAG_A  = (255,0,120,90)
NEON_MINT   = (0,255,200)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)
BG_TOP      = (24, 26, 32)
BG_BOTTOM   = (36, 40, 48)

ALGOS = {"DFS": DFSAlgo, "BFS": BFSAlgo}


# ---------- Loader ----------
class LoadedMaze:
    """Everything the viewer needs for one maze: rows, cell table, graph."""

    def __init__(self, rows: MazeGrid, maze: ParsedMaze, problem: SearchInput):
        self.rows = rows
        self.maze = maze
        self.problem = problem

    @property
    def width(self) -> int:
        return self.maze.width

    @property
    def height(self) -> int:
        return self.maze.height

    def position(self, node: NodeId) -> Position:
        return self.maze.open_cells[node]

    def is_wall(self, row: int, col: int) -> bool:
        line = self.rows[row]
        return col >= len(line) or line[col].upper() == "X"


def load_maze(path: Path) -> LoadedMaze:
    rows = read_maze(path)
    maze = parse_maze(rows)
    return LoadedMaze(rows, maze, build_search_input(maze))


def maze_files(args: List[str]) -> Dict[str, Path]:
    """Key each maze by file stem; stems seen more than once keep their full path."""
    paths = [Path(a) for a in args]
    stems = Counter(p.stem for p in paths)
    return {(p.stem if stems[p.stem] == 1 else str(p)): p for p in paths}


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle   = (36, 40, 48, 220)
        bg_hover  = (46, 50, 60, 230)
        bg_active = (58, 86, 160, 235)
        border_active = (120, 170, 255, 255)

        if self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event):
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()


# ---------- Viewer ----------
class Viewer:
    def __init__(self, mazes: Dict[str, Path]):
        if not mazes:
            raise ValueError("viewer needs at least one maze")
        pygame.init()

        self.maze_files = dict(mazes)
        self.maze_keys = list(self.maze_files)
        self.selected_maze_key = self.maze_keys[0]
        self.loaded = load_maze(self.maze_files[self.selected_maze_key])

        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        self.cell_size = self._auto_cell_size()
        win_w = GRID_MARGIN*2 + self.loaded.width * self.cell_size + PANEL_W
        win_h = max(GRID_MARGIN*2 + self.loaded.height * self.cell_size, 600)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption(f"Maze Search - {self.selected_maze_key}")

        self._buttons: list[UIButton] = []

        self.open_set: set[NodeId] = set()
        self.closed_set: set[NodeId] = set()
        self.path: List[NodeId] = []

        self.running = False
        self.clock = pygame.time.Clock()
        self.steps_per_sec = 8
        self.state = "Idle"
        self.selected_algo = "DFS"
        self._last_step_t = 0.0

        self.algo = self._make_algo(self.selected_algo)
        self._reset_overlays()
        self._layout(win_w, win_h)

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and place the grid."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        cs_by_w = avail_w // max(1, self.loaded.width)
        cs_by_h = avail_h // max(1, self.loaded.height)
        self.cell_size = int(max(4, min(cs_by_w, cs_by_h)))

        self._grid_origin = (GRID_MARGIN, GRID_MARGIN)
        grid_right = GRID_MARGIN*2 + self.loaded.width * self.cell_size
        self._right_band = pygame.Rect(grid_right, 0, max(PANEL_W, win_w - grid_right), win_h)
        self._build_buttons()

    def _auto_cell_size(self) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(6, min(CELL_SIZE_DEFAULT, target_h // max(1, self.loaded.height)))

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    def _tick_algorithm(self):
        t0 = time.monotonic()
        step_interval = 1.0 / max(1, self.steps_per_sec)
        if t0 - self._last_step_t >= step_interval:
            self._last_step_t = t0
            self._do_step()

    def _do_step(self):
        res = self.algo.step()
        for n in res.closed:
            self.open_set.discard(n)
            self.closed_set.add(n)
        for n in res.opened:
            self.open_set.add(n)
        if res.path is not None:
            self.path = res.path
        if res.status == "done":
            self.state = "Done"; self.running = False
        elif res.status == "no_path":
            self.state = "No path"; self.running = False
        elif res.status in ("running", "idle"):
            self.state = "Running" if self.running else "Idle"
        if res.metrics:
            self._last_metrics = res.metrics
        self._refresh_active_states()

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(-1)
                elif e.key == pygame.K_d:
                    self._switch_algo("DFS")
                elif e.key == pygame.K_b:
                    self._switch_algo("BFS")
                elif pygame.K_1 <= e.key <= pygame.K_9:
                    idx = e.key - pygame.K_1
                    if idx < len(self.maze_keys):
                        self._switch_maze(self.maze_keys[idx])
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                for b in self._buttons:
                    b.handle_mouse(e)

    def _make_algo(self, label: str) -> FrontierSearch:
        algo = ALGOS[label]()
        algo.init(self.loaded.problem)
        return algo

    def _switch_maze(self, key: str):
        if key not in self.maze_files:
            return
        try:
            self.loaded = load_maze(self.maze_files[key])
        except MazeError as ex:
            print(f"Failed to load maze {key}: {ex}")
            return
        self.selected_maze_key = key
        pygame.display.set_caption(f"Maze Search - {key}")
        self.algo = self._make_algo(self.selected_algo)
        self.running = False; self.state = "Idle"
        self._reset_overlays()
        self._layout(*self.screen.get_size())

    def _switch_algo(self, label: str):
        self.selected_algo = label
        self.algo = self._make_algo(label)
        self.running = False; self.state = "Idle"
        self._reset_overlays()
        self._refresh_active_states()

    def _reset_overlays(self):
        self.open_set.clear()
        self.closed_set.clear()
        self.path = []
        self.open_set.add(self.loaded.problem.start)
        self._last_metrics = {
            "algo": self.selected_algo,
            "popped": 0,
            "frontier_size": 1,
            "visited_count": 1,
            "path_len": 0,
        }

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self.algo.reset()
        self._reset_overlays()
        self._refresh_active_states()

    def _toggle_run(self):
        if self.state in ("Done", "No path"):
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.steps_per_sec = int(max(1, min(120, self.steps_per_sec + dv)))

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        for y in range(h):
            t = y / max(1, h-1)
            c = tuple(int(a + (b - a) * t) for a, b in zip(BG_TOP, BG_BOTTOM))
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _cell_rect(self, pos: Position) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        return pygame.Rect(ox + pos.col*cs, oy + pos.row*cs, cs, cs)

    def _draw_grid(self):
        lm = self.loaded
        for row in range(lm.height):
            for col in range(lm.width):
                rect = self._cell_rect(Position(row, col))
                pygame.draw.rect(self.screen, WALL_GRAY if lm.is_wall(row, col) else FLOOR_GRAY, rect)
                if self.cell_size >= 8:
                    pygame.draw.rect(self.screen, BLACK, rect, 1)

        cs = self.cell_size
        for overlay, color in ((self.closed_set, NEON_MAG_A), (self.open_set, NEON_CYAN_A)):
            s = pygame.Surface((cs, cs), pygame.SRCALPHA); s.fill(color)
            for node in overlay:
                self.screen.blit(s, self._cell_rect(lm.position(node)).topleft)

        if len(self.path) >= 2:
            pts = [self._cell_rect(lm.position(n)).center for n in self.path]
            pygame.draw.lines(self.screen, NEON_MINT, False, pts, max(2, cs // 5))

        self._draw_badge(lm.maze.start, BLUE, "S")
        self._draw_badge(lm.maze.goal, RED, "G")

    def _draw_badge(self, pos: Position, color: Tuple[int,int,int], label: str):
        rect = self._cell_rect(pos)
        pygame.draw.circle(self.screen, color, rect.center, max(3, self.cell_size//2 - 2))
        if self.cell_size >= 12:
            txt = self.font_small.render(label, True, WHITE)
            self.screen.blit(txt, txt.get_rect(center=rect.center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 230  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", self._toggle_run, togglable=True, store_as="btn_run"); y += h + gap
        add("Step Once", self._do_step); y += h + gap
        add("Reset", self._reset); y += h + gap
        add("Algo: DFS", lambda: self._switch_algo("DFS"), togglable=True, store_as="btn_algo_d"); y += h + gap
        add("Algo: BFS", lambda: self._switch_algo("BFS"), togglable=True, store_as="btn_algo_b"); y += h + gap
        self._maze_buttons: Dict[str, UIButton] = {}
        for i, key in enumerate(self.maze_keys[:9]):
            add(f"Maze {i+1}: {key}", lambda k=key: self._switch_maze(k), togglable=True)
            self._maze_buttons[key] = self._buttons[-1]
            y += h + gap

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(self.running)
        if hasattr(self, "btn_algo_d"):
            self.btn_algo_d.set_active(self.selected_algo == "DFS")
        if hasattr(self, "btn_algo_b"):
            self.btn_algo_b.set_active(self.selected_algo == "BFS")
        for key, btn in getattr(self, "_maze_buttons", {}).items():
            btn.set_active(key == self.selected_maze_key)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band
        card_h = 210
        card = pygame.Surface((rb.width - 20, card_h), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        m = self._last_metrics
        line(f"Popped: {m.get('popped', 0)}")
        line(f"Frontier: {m.get('frontier_size', 0)}")
        line(f"Visited: {m.get('visited_count', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        line("-" * 26)
        line(f"{self.selected_maze_key} - {self.state}")
        line(f"Algo: {self.selected_algo}   Speed: {self.steps_per_sec} steps/s")

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main(argv: Optional[List[str]] = None):
    args = sys.argv[1:] if argv is None else argv
    mazes = maze_files(args) if args else bundled_mazes()
    try:
        viewer = Viewer(mazes)
    except MazeError as ex:
        print(f"Failed to load maze: {ex}")
        sys.exit(1)
    viewer.run()


if __name__ == "__main__":
    main()
