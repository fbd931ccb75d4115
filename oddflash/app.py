"""Tk front end: a settings form and a full-screen flash window."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from oddflash.sequence import Stimulus
from oddflash.session import FlashSession, TriggerSender
from oddflash.settings import (
    DEFAULT_DURATION_TEXT,
    DEFAULT_INTERVAL_TEXT,
    DEFAULT_MAX_FLASHES_TEXT,
    DEFAULT_PORT_TEXT,
    Settings,
    SettingsError,
)
from oddflash.trigger import TriggerClient

if TYPE_CHECKING:
    import tkinter as tk

log = logging.getLogger(__name__)

IMAGE_BOX = 800
STANDARD_IMAGE = Path("res/1_output_135_degree.png")
DEVIANT_IMAGE = Path("res/1_red_output_135_degree.png")


def fit_within(width: int, height: int, box: int) -> tuple[int, int]:
    """Largest size with the same aspect ratio that fits a square box."""
    if width <= 0 or height <= 0 or box <= 0:
        raise ValueError("sizes must be positive")
    scaled_width = box * width // height
    if scaled_width <= box:
        return scaled_width, box
    return box, box * height // width


def _load_image(master: tk.Misc, path: Path):
    from PIL import Image, ImageTk

    try:
        with Image.open(path) as image:
            size = fit_within(image.width, image.height, IMAGE_BOX)
            return ImageTk.PhotoImage(image.resize(size), master=master)
    except OSError as exc:
        log.warning("Cannot load image %s: %s", path, exc)
        return None


class FlashWindow:
    """Full-screen window that flashes the session's stimuli."""

    def __init__(
        self,
        master: tk.Misc,
        settings: Settings,
        sender: TriggerSender | None = None,
    ) -> None:
        import tkinter as tk

        self._owned_client = TriggerClient() if sender is None else None
        self._sender: TriggerSender = sender if sender is not None else self._owned_client
        self.settings = settings
        self.session = FlashSession(self._sender, settings.port_address)
        self.closed = False
        self._pending: list[str] = []

        self.top = tk.Toplevel(master)
        self.top.configure(background="black")
        self.top.attributes("-fullscreen", True)
        self.top.protocol("WM_DELETE_WINDOW", self.close)

        self._images = {
            Stimulus.STANDARD: _load_image(self.top, STANDARD_IMAGE),
            Stimulus.DEVIANT: _load_image(self.top, DEVIANT_IMAGE),
        }
        self._label = tk.Label(self.top, background="black", borderwidth=0)
        self._label.place(relx=0.5, rely=0.5, anchor="center")
        self._show(Stimulus.STANDARD)

        self.session.start(
            settings.flash_interval,
            settings.flash_duration,
            settings.max_flashes,
            settings.port_address,
        )
        self._schedule(self.session.period(), self._tick)

    def _schedule(self, delay_ms: int, callback) -> None:
        self._pending.append(self.top.after(delay_ms, callback))

    def _show(self, stimulus: Stimulus) -> None:
        image = self._images[stimulus]
        self._label.configure(image=image if image is not None else "")

    def _clear(self) -> None:
        if not self.closed:
            self._label.configure(image="")

    def _tick(self) -> None:
        if self.closed:
            return
        stimulus = self.session.step()
        if stimulus is None:
            self.close()
            return
        self._show(stimulus)
        self._schedule(self.session.flash_duration, self._clear)
        self._schedule(self.session.period(), self._tick)

    def close(self) -> None:
        """Stop flashing and destroy the window."""
        if self.closed:
            return
        self.closed = True
        for after_id in self._pending:
            self.top.after_cancel(after_id)
        self._pending.clear()
        self.session.reset()
        self.top.destroy()
        if self._owned_client is not None:
            self._owned_client.close()


class SettingsWindow:
    """Form for the session parameters; confirming starts a flash window."""

    def __init__(self, master: tk.Misc) -> None:
        import tkinter as tk

        self.master = master
        self.flash_window: FlashWindow | None = None
        self.frame = tk.Frame(master, padx=12, pady=12)
        self.frame.pack(fill="both", expand=True)

        self.port_address = tk.StringVar(master, DEFAULT_PORT_TEXT)
        self.flash_interval = tk.StringVar(master, DEFAULT_INTERVAL_TEXT)
        self.flash_duration = tk.StringVar(master, DEFAULT_DURATION_TEXT)
        self.max_flashes = tk.StringVar(master, DEFAULT_MAX_FLASHES_TEXT)

        fields = (
            ("Port Address :", self.port_address),
            ("Flash Interval (ms):", self.flash_interval),
            ("Flash Duration (ms):", self.flash_duration),
            ("Max Flashes:", self.max_flashes),
        )
        for caption, variable in fields:
            tk.Label(self.frame, text=caption, anchor="w").pack(fill="x")
            tk.Entry(self.frame, textvariable=variable).pack(fill="x")
        tk.Button(self.frame, text="Confirm", command=self.confirm).pack(
            fill="x", pady=(8, 0)
        )

    def confirm(self) -> FlashWindow | None:
        """Read the form and start a new flash window, replacing any old one."""
        from tkinter import messagebox

        try:
            settings = Settings.from_text(
                self.port_address.get(),
                self.flash_interval.get(),
                self.flash_duration.get(),
                self.max_flashes.get(),
            )
        except SettingsError as exc:
            messagebox.showerror("Invalid settings", str(exc), parent=self.master)
            return None
        log.debug("Port address: %s", settings.port_address)
        if self.flash_window is not None:
            self.flash_window.close()
        self.flash_window = FlashWindow(self.master, settings)
        return self.flash_window


def main(argv: list[str] | None = None) -> int:
    """Open the settings window and run the event loop."""
    parser = argparse.ArgumentParser(
        prog="oddflash",
        description="Show an oddball flash sequence and send trigger codes.",
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    import tkinter as tk

    root = tk.Tk()
    root.title("Settings")
    SettingsWindow(root)
    root.mainloop()
    return 0