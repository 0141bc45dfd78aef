"""pygame front end: one window with the bar chart, controls and statistics."""
import logging
import math

import pygame

from .algorithms import ALGORITHMS
from .config import (
    BACKGROUND_COLOR, BAR_SPACING, COMPARING_COLOR, FPS, LABEL_MAX_SIZE,
    MAX_ARRAY_SIZE, MAX_SPEED, MIN_ARRAY_SIZE, MIN_SPEED, PIVOT_COLOR,
    SORTED_COLOR, SWAPPING_COLOR, UI_ACCENT, UI_BG, UI_BORDER, UI_DIM,
    UI_GREEN, UI_HOVER, UI_PANEL, UI_PANEL2, UI_SEL_BG, UI_SEL_BORDER,
    UI_SUBTEXT, UI_TEXT, VALUE_MAX, WINDOW_HEIGHT, WINDOW_WIDTH,
)
from .controller import PlaybackController
from .model import BarState
from .presenter import Presenter

logger = logging.getLogger(__name__)

# ============================================================
# ========================= LAYOUT CONSTANTS =================
# ============================================================

PAD      = 16
PANEL_W  = 300
RX       = WINDOW_WIDTH - PANEL_W + PAD
RW       = PANEL_W - 2 * PAD
CHART_X  = PAD
CHART_Y  = 84
CHART_W  = RX - 2 * PAD - CHART_X
CHART_H  = WINDOW_HEIGHT - CHART_Y - 48
BTN_H    = 30
BTN_GAP  = 5

_Y_ALGOS    = 96
_Y_SIZE     = _Y_ALGOS + len(ALGORITHMS) * (BTN_H + BTN_GAP) + 8
_Y_SPEED    = _Y_SIZE + 50
_Y_CONTROLS = _Y_SPEED + 54
_Y_STATS    = _Y_CONTROLS + 2 * (BTN_H + BTN_GAP) + 10

STATE_COLORS = {
    BarState.COMPARING: COMPARING_COLOR,
    BarState.SWAPPING:  SWAPPING_COLOR,
    BarState.PIVOT:     PIVOT_COLOR,
    BarState.SORTED:    SORTED_COLOR,
}

# ============================================================
# ======================= COLOR / DRAW =======================
# ============================================================

def value_to_color(value, max_value):
    r = min(1.0, value / max_value)
    if r < 0.25: return (0, int(255 * r * 4), 255)
    if r < 0.5:  return (0, 255, int(255 * (1 - (r - 0.25) * 4)))
    if r < 0.75: return (int(255 * (r - 0.5) * 4), 255, 0)
    return (255, int(255 * (1 - (r - 0.75) * 4)), 0)


class PygamePresenter(Presenter):
    """Holds whatever the controller pushed; ``draw_*`` paints it every frame."""

    def __init__(self):
        self.values     = []
        self.states     = {}
        self.progress   = 0.0
        self.statistics = (0, 0, 0, 0)
        self.controls   = (True, False, True)
        self.algorithm  = None

    def render_bar(self, index, value):
        self.values[index] = value

    def render_all_bars(self, values):
        self.values = list(values)
        self.states = {}

    def set_bar_state(self, index, state):
        if state is BarState.NONE:
            self.states.pop(index, None)
        else:
            self.states[index] = state

    def set_progress(self, fraction):
        self.progress = fraction

    def set_statistics(self, comparisons, swaps, array_accesses, elapsed_ms):
        self.statistics = (comparisons, swaps, array_accesses, elapsed_ms)

    def set_controls_enabled(self, play, pause, reset):
        self.controls = (play, pause, reset)

    def set_algorithm_info(self, descriptor):
        self.algorithm = descriptor

    def draw_bars(self, s, fonts):
        pygame.draw.rect(s, BACKGROUND_COLOR, (CHART_X, CHART_Y, CHART_W, CHART_H))
        n = len(self.values)
        if not n:
            return
        bw = CHART_W / n
        label = n <= LABEL_MAX_SIZE
        for i, v in enumerate(self.values):
            h = (v / VALUE_MAX) * (CHART_H - 8)
            st = self.states.get(i)
            c = STATE_COLORS[st] if st else value_to_color(v, VALUE_MAX)
            x = CHART_X + i * bw
            pygame.draw.rect(s, c, (x, CHART_Y + CHART_H - h, max(1, bw - BAR_SPACING), h))
            if label:
                t = fonts['mono_sm'].render(str(v), True, (0, 0, 0))
                s.blit(t, t.get_rect(midbottom=(x + bw / 2, CHART_Y + CHART_H - 2)))

    def draw_progress(self, s):
        y = CHART_Y + CHART_H + 14
        pygame.draw.rect(s, UI_BORDER, (CHART_X, y, CHART_W, 8), border_radius=3)
        fw = int(CHART_W * max(0.0, min(1.0, self.progress)))
        if fw > 0:
            pygame.draw.rect(s, UI_GREEN, (CHART_X, y, fw, 8), border_radius=3)

    def draw_stats(self, s, fonts, y):
        comparisons, swaps, accesses, elapsed = self.statistics
        rows = [("Comparisons", comparisons), ("Swaps", swaps),
                ("Array accesses", accesses), ("Time", f"{elapsed}ms")]
        for label, val in rows:
            s.blit(fonts['small'].render(label, True, UI_SUBTEXT), (RX, y))
            t = fonts['mono_sm'].render(str(val), True, UI_TEXT)
            s.blit(t, (RX + RW - t.get_width(), y + 1))
            y += 18
        return y

    def draw_info(self, s, fonts, y):
        a = self.algorithm
        if a is None:
            return
        s.blit(fonts['mid'].render(a.name, True, UI_ACCENT), (RX, y))
        y += 22
        for line in _wrap(a.description, fonts['small'], RW):
            s.blit(fonts['small'].render(line, True, UI_SUBTEXT), (RX, y))
            y += 16
        y += 4
        for label, val in (("Best", a.best), ("Average", a.average),
                           ("Worst", a.worst), ("Space", a.space)):
            s.blit(fonts['small'].render(label, True, UI_SUBTEXT), (RX, y))
            t = fonts['mono_sm'].render(val, True, UI_TEXT)
            s.blit(t, (RX + RW - t.get_width(), y + 1))
            y += 16


def _wrap(text, font, width):
    lines, cur = [], ""
    for word in text.split():
        trial = f"{cur} {word}".strip()
        if font.size(trial)[0] <= width:
            cur = trial
        else:
            lines.append(cur); cur = word
    if cur:
        lines.append(cur)
    return lines

# ============================================================
# ========================= UI WIDGETS =======================
# ============================================================

class Slider:
    """Single-knob integer slider."""
    KNOB_RADIUS = 6

    def __init__(self, x, y, w, lo, hi, val, label):
        self.x, self.y, self.w = x, y, w
        self.lo, self.hi = lo, hi
        self.value = val
        self.label = label
        self.drag = False
        self.enabled = True
        self.track = pygame.Rect(x, y+18, w, 4)
        self.hit = pygame.Rect(x-5, y, w+10, 38)

    def _r(self):
        return (self.value - self.lo) / (self.hi - self.lo)

    def _kx(self):
        return int(self.x + self._r() * self.w)

    def handle(self, ev) -> bool:
        """Returns True when the value changed."""
        if not self.enabled:
            self.drag = False
            return False
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if math.hypot(ev.pos[0]-self._kx(), ev.pos[1]-self.track.centery) < 14 \
               or self.hit.collidepoint(ev.pos):
                self.drag = True
                return self._set(ev.pos[0])
        elif ev.type == pygame.MOUSEBUTTONUP:
            self.drag = False
        elif ev.type == pygame.MOUSEMOTION and self.drag:
            return self._set(ev.pos[0])
        return False

    def _set(self, mx):
        r = max(0.0, min(1.0, (mx - self.x) / self.w))
        new = int(round(self.lo + r * (self.hi - self.lo)))
        changed = new != self.value
        self.value = new
        return changed

    def draw(self, s, fonts):
        accent = UI_ACCENT if self.enabled else UI_DIM
        s.blit(fonts['small'].render(f"{self.label}:  {self.value}", True, UI_SUBTEXT), (self.x, self.y))
        pygame.draw.rect(s, UI_BORDER, self.track, border_radius=2)
        fw = int(self._r() * self.w)
        if fw > 0: pygame.draw.rect(s, accent, (self.x, self.track.y, fw, 4), border_radius=2)
        kx, ky = self._kx(), self.track.centery
        pygame.draw.circle(s, UI_PANEL2, (kx, ky), self.KNOB_RADIUS)
        pygame.draw.circle(s, accent, (kx, ky), self.KNOB_RADIUS, 2)
        pygame.draw.circle(s, accent, (kx, ky), 2)


class AlgoBtn:
    def __init__(self, x, y, w, descriptor, idx):
        self.rect = pygame.Rect(x, y, w, BTN_H)
        self.key, self.name, self.idx = descriptor.key, descriptor.name, idx

    def draw(self, s, fonts, sel, hov, enabled):
        bg = UI_SEL_BG if sel else (UI_HOVER if hov and enabled else UI_PANEL)
        br = UI_SEL_BORDER if sel else (UI_DIM if hov and enabled else UI_BORDER)
        pygame.draw.rect(s, bg, self.rect, border_radius=5)
        pygame.draw.rect(s, br, self.rect, 1, border_radius=5)
        nc = UI_ACCENT if sel else UI_SUBTEXT
        tc = UI_TEXT if sel or (hov and enabled) else (150, 150, 170)
        s.blit(fonts['mono_sm'].render(f"{self.idx+1:02d}", True, nc),
               (self.rect.x+10, self.rect.y+9))
        s.blit(fonts['mid'].render(self.name, True, tc), (self.rect.x+40, self.rect.y+6))


class SmBtn:
    def __init__(self, x, y, w, h, lbl):
        self.rect = pygame.Rect(x, y, w, h); self.label = lbl
    def draw(self, s, fonts, enabled=True, hov=False):
        bg = (UI_HOVER if hov else UI_PANEL2) if enabled else UI_PANEL
        fc = UI_TEXT if enabled else UI_DIM
        pygame.draw.rect(s, bg,        self.rect, border_radius=5)
        pygame.draw.rect(s, UI_BORDER, self.rect, 1, border_radius=5)
        t = fonts['small'].render(self.label, True, fc)
        s.blit(t, t.get_rect(center=self.rect.center))

# ============================================================
# ========================== WINDOW ==========================
# ============================================================

class Window:
    def __init__(self, screen, fonts, controller: PlaybackController, presenter: PygamePresenter):
        self.screen     = screen
        self.fonts      = fonts
        self.controller = controller
        self.view       = presenter
        self.hov        = -1

        self.algo_btns = [AlgoBtn(RX, _Y_ALGOS + i * (BTN_H + BTN_GAP), RW, d, i)
                          for i, d in enumerate(ALGORITHMS.values())]
        self.sl_size  = Slider(RX, _Y_SIZE,  RW, MIN_ARRAY_SIZE, MAX_ARRAY_SIZE,
                               controller.size, "Array Size")
        self.sl_speed = Slider(RX, _Y_SPEED, RW, MIN_SPEED, MAX_SPEED,
                               controller.speed, "Speed")

        half = (RW - BTN_GAP) // 2
        row2 = _Y_CONTROLS + BTN_H + BTN_GAP
        self.play_btn  = SmBtn(RX,                  _Y_CONTROLS, half, BTN_H, "Play")
        self.pause_btn = SmBtn(RX + half + BTN_GAP, _Y_CONTROLS, half, BTN_H, "Pause")
        self.reset_btn = SmBtn(RX,                  row2,        half, BTN_H, "Reset")
        self.new_btn   = SmBtn(RX + half + BTN_GAP, row2,        half, BTN_H, "New Array")

    def handle(self, ev):
        c = self.controller
        if self.sl_size.handle(ev):
            c.set_array_size(self.sl_size.value)
        if self.sl_speed.handle(ev):
            c.set_speed(self.sl_speed.value)

        if ev.type == pygame.MOUSEMOTION:
            self.hov = -1
            for b in self.algo_btns:
                if b.rect.collidepoint(ev.pos): self.hov = b.idx

        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            for b in self.algo_btns:
                if b.rect.collidepoint(ev.pos): c.select_algorithm(b.key)
            play_ok, pause_ok, reset_ok = self.view.controls
            if play_ok and self.play_btn.rect.collidepoint(ev.pos): c.play()
            elif pause_ok and self.pause_btn.rect.collidepoint(ev.pos): c.pause()
            if reset_ok and self.reset_btn.rect.collidepoint(ev.pos): c.reset()
            if self.new_btn.rect.collidepoint(ev.pos): c.generate_array()

        if ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_SPACE:
                if self.view.controls[0]: c.play()
                else: c.pause()
            elif ev.key == pygame.K_r: c.reset()
            elif ev.key == pygame.K_n: c.generate_array()
            elif pygame.K_1 <= ev.key < pygame.K_1 + len(self.algo_btns):
                c.select_algorithm(self.algo_btns[ev.key - pygame.K_1].key)

        # Size is locked while a sort runs; keep the knob on the real value.
        self.sl_size.enabled = not c.is_active
        self.sl_size.value = c.size

    def draw(self):
        s  = self.screen
        mp = pygame.mouse.get_pos()
        c  = self.controller
        s.fill(UI_BG)

        t1 = self.fonts['title'].render("SortViz", True, UI_TEXT)
        t2 = self.fonts['title'].render("SortViz", True, UI_ACCENT)
        s.blit(t2, (PAD+1, 23)); s.blit(t1, (PAD, 22))
        s.blit(self.fonts['small'].render(f"{c.state.value}", True, UI_SUBTEXT),
               (PAD + t1.get_width() + 12, 31))
        pygame.draw.line(s, UI_BORDER, (PAD, 68), (WINDOW_WIDTH-PAD, 68), 1)

        self.view.draw_bars(s, self.fonts)
        self.view.draw_progress(s)

        panel = pygame.Rect(RX-10, 76, RW+20, WINDOW_HEIGHT-82)
        pygame.draw.rect(s, UI_PANEL,  panel, border_radius=7)
        pygame.draw.rect(s, UI_BORDER, panel, 1, border_radius=7)
        s.blit(self.fonts['small'].render("ALGORITHM", True, UI_SUBTEXT), (RX, _Y_ALGOS - 14))

        for b in self.algo_btns:
            b.draw(s, self.fonts, b.key == c.algorithm.key, b.idx == self.hov, not c.is_active)

        self.sl_size.draw(s, self.fonts)
        self.sl_speed.draw(s, self.fonts)

        play_ok, pause_ok, reset_ok = self.view.controls
        self.play_btn.draw(s, self.fonts, play_ok, self.play_btn.rect.collidepoint(mp))
        self.pause_btn.draw(s, self.fonts, pause_ok, self.pause_btn.rect.collidepoint(mp))
        self.reset_btn.draw(s, self.fonts, reset_ok, self.reset_btn.rect.collidepoint(mp))
        self.new_btn.draw(s, self.fonts, not c.is_active, self.new_btn.rect.collidepoint(mp))

        y = self.view.draw_stats(s, self.fonts, _Y_STATS)
        pygame.draw.line(s, UI_BORDER, (RX, y + 6), (RX + RW, y + 6), 1)
        self.view.draw_info(s, self.fonts, y + 14)

        s.blit(self.fonts['small'].render("Space play/pause  R reset  N new  1-5 algorithm",
                                          True, UI_DIM), (PAD, WINDOW_HEIGHT - 22))
        pygame.display.flip()

# ============================================================
# ========================= MAIN =============================
# ============================================================

def build_fonts():
    def tf(names, sz):
        for n in names:
            try: return pygame.font.SysFont(n, sz)
            except Exception: pass
        return pygame.font.SysFont(None, sz)
    mono = ["Consolas", "Courier New", "Lucida Console"]
    sans = ["Segoe UI", "Tahoma", "Arial"]
    return dict(title=tf(mono, 26), mid=tf(sans, 16),
                small=tf(sans, 13), mono_sm=tf(mono, 12))


def run(algorithm, size, speed, seed=None, values=None):
    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption("SortViz")
    fonts = build_fonts(); clock = pygame.time.Clock()

    presenter  = PygamePresenter()
    controller = PlaybackController(presenter, array=values, algorithm=algorithm,
                                    size=size, speed=speed, seed=seed)
    window = Window(screen, fonts, controller, presenter)
    logger.info("Window open, %s selected", controller.algorithm.name)

    while True:
        clock.tick(FPS)
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT or (ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE):
                controller.reset(); pygame.quit()
                return
            window.handle(ev)
        controller.tick()
        window.draw()
