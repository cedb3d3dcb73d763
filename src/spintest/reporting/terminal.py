"""Terminal renderer producing the text pushed through an emit sink."""
from __future__ import annotations

from colorama import Fore, Style

from spintest.core.models import RunSummary

SPINNER_FRAMES = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")

BANNER_WIDTH = 44
DIVIDER = "─" * (BANNER_WIDTH + 1)
CLEAR_LINE = "\r\x1b[K"


class TerminalRenderer:
    """Formats banners, per-test lines and summaries as styled text.

    Nothing is written here; every method returns a string for the caller to
    emit. With ``use_color=False`` no ANSI styling directives are produced,
    only the carriage-return line clear used to erase the spinner.
    """

    def __init__(self, *, use_color: bool = True) -> None:
        self._use_color = use_color

    def line(self, text: str = "", color: str = "") -> str:
        if not self._use_color:
            return f"{text}\n"
        return f"{color}{text}{Style.RESET_ALL}\n"

    def banner(self, title: str) -> str:
        color = self._c(Fore.CYAN + Style.BRIGHT)
        inner = BANNER_WIDTH - 4
        title_text = title if len(title) <= inner else title[: inner - 1] + "…"
        return "".join(
            (
                self.line(),
                self.line("╔" + "═" * BANNER_WIDTH + "╗", color),
                self.line(f"║ 🧪  {title_text.center(inner)}║", color),
                self.line("╚" + "═" * BANNER_WIDTH + "╝", color),
                self.line(),
            )
        )

    def spinner_frame(self, name: str, index: int) -> str:
        frame = SPINNER_FRAMES[index % len(SPINNER_FRAMES)]
        return f"\r  {self._c(Fore.CYAN)}{frame}{self._reset()} Running {name}..."

    def clear_line(self) -> str:
        return CLEAR_LINE

    def passed(self, name: str) -> str:
        mark = f"{self._c(Fore.GREEN)}✓{self._reset()}"
        return self.line(f"  {mark} {name}", self._c(Fore.GREEN))

    def failed(self, name: str, message: str) -> str:
        mark = f"{self._c(Fore.RED)}✗{self._reset()}"
        cause = f"{self._c(Style.DIM)}└─ {message}{self._reset()}"
        return self.line(f"  {mark} {name}", self._c(Fore.RED + Style.BRIGHT)) + self.line(
            f"     {cause}", self._c(Fore.RED + Style.DIM)
        )

    def summary(self, summary: RunSummary) -> str:
        status_color = self._c(Fore.GREEN if summary.all_passed else Fore.YELLOW)
        gray = self._c(Fore.LIGHTBLACK_EX)
        reset = self._reset()
        counts = (
            f"  Tests: {self._c(Style.BRIGHT)}{summary.total}{reset} | "
            f"{status_color}Passed: {summary.passed}{reset} | "
            f"{self._c(Fore.RED)}Failed: {summary.failed}{reset}"
        )
        rate = f"  Success Rate: {status_color}{summary.success_rate_text}%{reset}"
        return "".join(
            (
                self.line(),
                self.line(DIVIDER, gray),
                self.line(counts, status_color),
                self.line(rate, status_color),
                self.line(DIVIDER, gray),
                self.line(),
            )
        )

    def notice(self, text: str) -> str:
        return self.line(text, self._c(Fore.CYAN + Style.BRIGHT))

    def session_summary(self, suites: int, summary: RunSummary) -> str:
        status_color = self._c(Fore.GREEN if summary.all_passed else Fore.RED)
        return self.line(
            f"Suites: {suites} | Tests: {summary.total} | Passed: {summary.passed} | "
            f"Failed: {summary.failed} | Success Rate: {summary.success_rate_text}%",
            status_color,
        )

    def execution_error(self, message: str) -> str:
        return self.line(f"⚠️ Test execution error: {message}", self._c(Fore.RED))

    def _c(self, code: str) -> str:
        return code if self._use_color else ""

    def _reset(self) -> str:
        return Style.RESET_ALL if self._use_color else ""
