"""Контроллер приложения: оркестрация UI и сервисов.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики обработки изображений).
- DIP: зависит от сервисов как от абстрактных ролей; конкретные реализации инкапсулированы.
Clean Code:
- Обработчики компактны; тяжёлая логика вынесена в сервисы.
- Ошибки показываются пользователю, предыдущий результат при этом сохраняется.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from tkinter import filedialog, messagebox, TclError
from typing import Optional

import customtkinter as ctk
import tkinter as tk

from squarepad.config import AppConfig, DEFAULT_CONFIG
from squarepad.errors import SquarePadError
from squarepad.models.session_model import Session
from squarepad.services.image_service import ImageService
from squarepad.services.process_service import ProcessService
from squarepad.ui.bottom_bar import BottomBar
from squarepad.ui.preview_panel import PreviewPanel
from squarepad.ui.sidebar import Sidebar

_controller_logger = logging.getLogger("SquarePad.controller")


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Загрузка изображений через `ImageService`.
    - Построение квадрата через `ProcessService` и показ результата.
    - Сохранение, сброс и отложенная перерисовка при изменении размеров окна.
    """
    original_view: PreviewPanel
    square_view: PreviewPanel
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk
    config: AppConfig = DEFAULT_CONFIG

    _image_service: ImageService = field(default_factory=ImageService)
    _process_service: Optional[ProcessService] = None
    _session: Session = field(default_factory=Session)
    _resize_job: Optional[str] = None

    def __post_init__(self) -> None:
        if self._process_service is None:
            self._process_service = ProcessService(self.config)

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами.

        Сохраняет слабую связность: компоненты UI ничего не знают друг о друге,
        общаются через контроллер.
        """
        self.sidebar.on_open_file = self._handle_open_file
        self.sidebar.on_download = self._handle_download
        self.sidebar.on_reset = self._handle_reset
        self.window.bind("<Configure>", self._handle_window_configure, add="+")

    # ---- Handlers ----
    def _handle_open_file(self) -> None:
        try:
            file_path = filedialog.askopenfilename(
                title="Выберите изображение",
                filetypes=(
                    ("Images", "*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp"),
                    ("All files", "*.*"),
                ),
            )
        except TclError:
            # Silent fail if dialog cannot open
            return

        if not file_path:
            return
        self.open_path(file_path)

    def open_path(self, file_path: str | Path) -> None:
        """Загружает файл и строит квадрат; при ошибке прежнее состояние не меняется."""
        self.sidebar.set_busy(True)
        self.bottom.show_loading(True)
        self.window.update_idletasks()
        try:
            image_data = self._image_service.load_image(file_path)
            self._process_service.process(
                self._session,
                image_data,
                viewport_width=self._viewport_width(),
                container_width=self._container_width(),
            )
        except (SquarePadError, OSError) as exc:
            _controller_logger.error(f"Failed to process {file_path}: {exc}")
            self.bottom.set_status(self._status_text())
            messagebox.showerror("Ошибка", f"Не удалось обработать изображение.\n{exc}")
            return
        finally:
            self.sidebar.set_busy(False)
            self.bottom.show_loading(False)

        self._refresh_views()

    def _handle_download(self) -> None:
        if self._session.result is None:
            messagebox.showwarning("Нет результата", "Нет изображения для сохранения. Сначала откройте изображение.")
            return
        try:
            file_path = filedialog.asksaveasfilename(
                title="Сохранить квадратное изображение",
                initialfile=self.config.download_filename,
                defaultextension=".png",
                filetypes=(("PNG", "*.png"),),
            )
        except TclError:
            return

        if not file_path:
            return
        try:
            saved = self._process_service.save_result(self._session, file_path)
        except OSError as exc:
            _controller_logger.error(f"Failed to save {file_path}: {exc}")
            messagebox.showerror("Ошибка", f"Не удалось сохранить файл.\n{exc}")
            return
        self.bottom.set_status(f"Сохранено: {saved}")

    def _handle_reset(self) -> None:
        self._cancel_pending_relayout()
        self._session.reset()
        self.original_view.clear()
        self.square_view.clear()
        self.sidebar.clear_info()
        self.sidebar.set_actions_enabled(False)
        self.bottom.set_status("")
        _controller_logger.debug("Session reset")

    def _handle_window_configure(self, event: tk.Event) -> None:
        # <Configure> fires for every child widget too
        if event.widget is not self.window:
            return
        self._cancel_pending_relayout()
        self._resize_job = self.window.after(self.config.resize_debounce_ms, self._apply_relayout)

    # ---- Helpers ----
    def _apply_relayout(self) -> None:
        self._resize_job = None
        if not self._session.has_image:
            return
        try:
            self._process_service.relayout(
                self._session,
                viewport_width=self._viewport_width(),
                container_width=self._container_width(),
            )
        except SquarePadError as exc:
            _controller_logger.error(f"Relayout failed: {exc}")
            return
        self._refresh_views()

    def _cancel_pending_relayout(self) -> None:
        if self._resize_job is not None:
            self.window.after_cancel(self._resize_job)
            self._resize_job = None

    def _refresh_views(self) -> None:
        session = self._session
        if session.image is None or session.result is None:
            return
        self.original_view.show(session.original_surface.snapshot(), session.original_info)
        self.square_view.show(session.square_surface.snapshot(), session.square_info)
        self.sidebar.set_image_info(session.image)
        if session.dominant_color is not None:
            self.sidebar.set_dominant_color(session.dominant_color)
        self.sidebar.set_actions_enabled(True)
        self.bottom.set_status(self._status_text())

    def _status_text(self) -> str:
        if self._session.result is None:
            return ""
        side = self._session.result.spec.side
        return f"Готово: {side}×{side}px"

    def _viewport_width(self) -> int:
        return int(self.window.winfo_width())

    def _container_width(self) -> Optional[int]:
        width = self.original_view.get_container_width() - self.config.container_padding
        return width if width > 0 else None
