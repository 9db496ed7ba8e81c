import logging
import os
import typing as tp
from pathlib import Path
from urllib.parse import unquote, urlparse

from textual import events, on
from textual.app import App, ComposeResult, ScreenStackError
from textual.binding import Binding
from textual.message import Message
from textual.containers import Grid, Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import (
    Button, ContentSwitcher, DirectoryTree, Footer, Header, Input, Static,
)

from .accrual_timer import AccrualTimer
from .config import TimerConfig
from .formatting import formatCurrency, formatElapsed
from .intake import acceptedExtensions, intakeFile
from .intake_interface import IntakeInterface
from .shared import UnsupportedFileType, titled

log = logging.getLogger(__name__)

HOW_IT_WORKS = (
    'Load your payslip as a PDF and the timer works out how much you '
    'earn every second from your net monthly pay and working hours.'
)

class NoticeScreen(ModalScreen[None]):
    BINDINGS = [
        Binding("escape", "dismiss_notice", "OK."),
    ]

    def __init__(self, message: str) -> None:
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        with titled(Vertical(id="notice-box"), 'Notice'):
            yield Static(self.message, id="notice-text")
            yield Button("OK", id="notice-ok-btn", variant="error")

    def on_mount(self) -> None:
        self.query_one('#notice-ok-btn', Button).focus()

    @on(Button.Pressed, '#notice-ok-btn')
    def action_dismiss_notice(self) -> None:
        self.dismiss(None)

class PdfTree(DirectoryTree):
    def __init__(self, path: str | Path, extensions: tp.Sequence[str], **kw) -> None:
        super().__init__(path, **kw)
        self.extensions = {e.lower() for e in extensions}

    def filter_paths(self, paths: tp.Iterable[Path]) -> tp.Iterable[Path]:
        return [
            p for p in paths
            if not p.name.startswith('.') and (
                p.is_dir() or p.suffix.lower() in self.extensions
            )
        ]

def pastedPath(text: str) -> str | None:
    '''
    Terminals paste a dropped file as its (maybe quoted) path or a file:// URL.
    '''
    text = text.strip()
    if not text or '\n' in text:
        return None
    if text[0] == text[-1] and text[0] in '\'"':
        text = text[1:-1]
    if text.startswith('file://'):
        text = unquote(urlparse(text).path)
    return text or None

class PathInput(Input):
    class Dropped(Message):
        def __init__(self, path: str) -> None:
            super().__init__()
            self.path = path

    def _on_paste(self, event: events.Paste) -> None:
        path = pastedPath(event.text)
        if path is None:
            return   # falls through to Input
        event.prevent_default()
        event.stop()
        self.post_message(self.Dropped(path))

class UI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding("space", "toggle_running", "Start/Pause."),
        Binding("r", "reset", "Reset."),
        Binding("u", "unload", "New payslip."),
        Binding("o", "focus_path", "Open."),
        Binding("q", "quit", "Quit."),
    ]

    def __init__(
        self,
        intake: IntakeInterface,
        config: TimerConfig | None = None,
        browse_dir: str = '.',
        initial_path: str | None = None,
    ) -> None:
        '''
        `initial_path` is loaded on mount as if the user had picked it.
        '''
        super().__init__()

        self.intake = intake
        self.config = config or TimerConfig()
        self.browse_dir = browse_dir
        self.initial_path = initial_path

        self.accrual_timer = AccrualTimer(
            self.set_interval,
            tick_interval=self.config.tick_interval,
            onChange=self.onTimerChanged,
        )

        self.title = "Salary Timer"
        self.sub_title = "How much you earn every second"

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)

        with ContentSwitcher(id="main-switcher", initial="upload-pane"):
            with titled(Vertical(id="upload-pane"), 'Upload payslip'):
                yield Static(
                    "Drag the payslip PDF onto this window,\n"
                    "or type its path, or pick it below.",
                    id="drop-hint",
                )
                yield PathInput(placeholder="Path to payslip PDF...", id="path-input")
                yield PdfTree(
                    self.browse_dir, acceptedExtensions(), id="pdf-tree",
                )
            with Vertical(id="loaded-pane"):
                with titled(Grid(id="record-card"), 'Payslip'):
                    yield Static("Gross pay", classes='field-label')
                    yield Static("Net pay", classes='field-label')
                    yield Static("", id="gross-value", classes='field-value')
                    yield Static("", id="net-value", classes='field-value')
                    yield Static("Working hours", classes='field-label')
                    yield Static("Per second", classes='field-label')
                    yield Static("", id="hours-value", classes='field-value')
                    yield Static("", id="rate-value", classes='field-value')
                yield Button("Load new payslip", id="unload-btn")
                with titled(Vertical(id="timer-card"), 'Current earnings'):
                    yield Static("", id="earnings-display")
                    yield Static("", id="elapsed-display")
                    with Horizontal(id="timer-controls"):
                        yield Button("Start", id="toggle-btn", variant="primary")
                        yield Button("Reset", id="reset-btn")

        yield titled(Static(HOW_IT_WORKS, id="info-card"), 'How it works')
        yield Footer(compact=True)

    def on_mount(self) -> None:
        self.myUpdate()
        if self.initial_path is not None:
            self.loadPath(self.initial_path)

    def loadPath(self, path: str) -> bool:
        try:
            record = intakeFile(self.intake, path)
        except UnsupportedFileType as e:
            self.push_screen(
                NoticeScreen(f'Please upload a valid PDF file.\n\n{e}'),
                callback=lambda _: self.myUpdate(),
            )
            return False
        self.accrual_timer.loadPayRecord(record)
        self.query_one('#toggle-btn', Button).focus()
        return True

    @on(Input.Submitted, '#path-input')
    def onPathSubmitted(self, event: Input.Submitted) -> None:
        path = os.path.expanduser(event.value.strip())
        if not path:
            return
        if self.loadPath(path):
            event.input.value = ''

    @on(DirectoryTree.FileSelected, '#pdf-tree')
    def onFileSelected(self, event: DirectoryTree.FileSelected) -> None:
        self.loadPath(str(event.path))

    @on(PathInput.Dropped)
    def onPathDropped(self, event: PathInput.Dropped) -> None:
        log.debug('dropped %s', event.path)
        self.loadPath(event.path)

    def on_paste(self, event: events.Paste) -> None:
        path = pastedPath(event.text)
        if path is None:
            return
        log.debug('pasted %s', path)
        self.loadPath(path)

    @on(Button.Pressed, '#toggle-btn')
    def action_toggle_running(self) -> None:
        self.accrual_timer.toggle()

    @on(Button.Pressed, '#reset-btn')
    def action_reset(self) -> None:
        self.accrual_timer.reset()

    @on(Button.Pressed, '#unload-btn')
    def action_unload(self) -> None:
        self.accrual_timer.unloadPayRecord()
        self.query_one('#path-input', Input).focus()

    def action_focus_path(self) -> None:
        if self.accrual_timer.pay_record is not None:
            return
        self.query_one('#path-input', Input).focus()

    def onTimerChanged(self, _: AccrualTimer) -> None:
        self.myUpdate()

    def myUpdate(self) -> None:
        try:
            self.screen
        except ScreenStackError:
            return
        if isinstance(self.screen, NoticeScreen):
            return   # redrawn on dismissal
        record = self.accrual_timer.pay_record
        switcher: ContentSwitcher = self.query_one('#main-switcher', ContentSwitcher)
        switcher.current = (
            'upload-pane' if record is None else
            'loaded-pane'
        )
        if record is not None:
            card: Grid = self.query_one('#record-card', Grid)
            card.border_title = record.source_name
            self.query_one('#gross-value', Static).update(
                formatCurrency(record.gross_monthly, self.config),
            )
            self.query_one('#net-value', Static).update(
                formatCurrency(record.net_monthly, self.config),
            )
            self.query_one('#hours-value', Static).update(
                f'{record.working_hours:g}h',
            )
            self.query_one('#rate-value', Static).update(
                formatCurrency(self.accrual_timer.rate_per_second, self.config),
            )
        self.query_one('#earnings-display', Static).update(
            formatCurrency(self.accrual_timer.accumulated_earnings, self.config),
        )
        self.query_one('#elapsed-display', Static).update(
            f'Time: {formatElapsed(self.accrual_timer.elapsedSeconds())}',
        )
        bToggle: Button = self.query_one('#toggle-btn', Button)
        bToggle.label = 'Pause' if self.accrual_timer.running else 'Start'
        bToggle.disabled = not (self.accrual_timer.running or self.accrual_timer.canStart)

    def exit(self, result=None, return_code=0, message=None) -> None:
        self.accrual_timer.pause()
        return super().exit(result, return_code, message)
