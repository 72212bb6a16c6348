"""Боковая панель: открытие файла, сохранение, сброс, информация об изображении.

Принципы:
- SRP: управляет только UI, не содержит алгоритмов.
- ISP: события наружу через `on_*`, состояние внутрь через компактные `set_*`.
"""
from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk

from squarepad.models.color_model import RGBColor
from squarepad.models.image_model import ImageData


class Sidebar(ctk.CTkFrame):
    """Панель инструментов с блоками: файл, информация, цвет фона."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_open_file: Optional[Callable[[], None]] = None
        self.on_download: Optional[Callable[[], None]] = None
        self.on_reset: Optional[Callable[[], None]] = None

        # Controls
        self._title = ctk.CTkLabel(self, text="Инструменты", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._open_btn = ctk.CTkButton(self, text="Открыть изображение…", command=self._emit_open_file)
        self._open_btn.grid(row=1, column=0, padx=8, pady=(0, 6), sticky="ew")

        self._download_btn = ctk.CTkButton(self, text="Скачать PNG…", command=self._emit_download)
        self._download_btn.grid(row=2, column=0, padx=8, pady=(0, 6), sticky="ew")

        self._reset_btn = ctk.CTkButton(
            self, text="Сбросить", fg_color="transparent", border_width=1, command=self._emit_reset
        )
        self._reset_btn.grid(row=3, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=16, weight="bold"))
        self._info_title.grid(row=4, column=0, padx=8, pady=(8, 4), sticky="w")

        self._path_val = ctk.StringVar(value="—")
        self._size_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")
        self._mode_val = ctk.StringVar(value="—")

        self._info_path = ctk.CTkLabel(self, textvariable=self._path_val, wraplength=250, anchor="w", justify="left")
        self._info_size = ctk.CTkLabel(self, textvariable=self._size_val, anchor="w", justify="left")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")
        self._info_mode = ctk.CTkLabel(self, textvariable=self._mode_val, anchor="w", justify="left")

        self._info_path.grid(row=5, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_size.grid(row=6, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_dims.grid(row=7, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_mode.grid(row=8, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Background color section
        self._color_title = ctk.CTkLabel(self, text="Цвет фона", font=ctk.CTkFont(size=16, weight="bold"))
        self._color_title.grid(row=9, column=0, padx=8, pady=(8, 4), sticky="w")

        self._swatch = ctk.CTkFrame(self, height=32, corner_radius=6, fg_color="transparent", border_width=1)
        self._swatch.grid(row=10, column=0, padx=8, pady=(0, 4), sticky="ew")
        self._color_css_val = ctk.StringVar(value="—")
        self._color_hex_val = ctk.StringVar(value="—")
        self._color_css = ctk.CTkLabel(self, textvariable=self._color_css_val, anchor="w", justify="left")
        self._color_hex = ctk.CTkLabel(self, textvariable=self._color_hex_val, anchor="w", justify="left")
        self._color_css.grid(row=11, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._color_hex.grid(row=12, column=0, padx=8, pady=(0, 10), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

        self.set_actions_enabled(False)

    # ---- Public API ----
    def set_image_info(self, image_data: ImageData) -> None:
        """Отображает метаданные загруженного изображения."""
        self._path_val.set(str(image_data.path))
        self._size_val.set(self._format_size(image_data.size_bytes))
        self._dims_val.set(f"{image_data.width} × {image_data.height} px")
        self._mode_val.set(f"{image_data.mode} ({image_data.mime_type})")

    def set_dominant_color(self, color: RGBColor) -> None:
        self._swatch.configure(fg_color=color.to_hex())
        self._color_css_val.set(color.to_css())
        self._color_hex_val.set(f"HEX: {color.to_hex().upper()}")

    def clear_info(self) -> None:
        for var in (
            self._path_val,
            self._size_val,
            self._dims_val,
            self._mode_val,
            self._color_css_val,
            self._color_hex_val,
        ):
            var.set("—")
        self._swatch.configure(fg_color="transparent")

    def set_actions_enabled(self, enabled: bool) -> None:
        """Кнопки «Скачать» и «Сбросить» активны только при наличии результата."""
        state = "normal" if enabled else "disabled"
        self._download_btn.configure(state=state)
        self._reset_btn.configure(state=state)

    def set_busy(self, busy: bool) -> None:
        self._open_btn.configure(state="disabled" if busy else "normal")

    # ---- Events ----
    def _emit_open_file(self) -> None:
        if self.on_open_file:
            self.on_open_file()

    def _emit_download(self) -> None:
        if self.on_download:
            self.on_download()

    def _emit_reset(self) -> None:
        if self.on_reset:
            self.on_reset()

    # ---- Helpers ----
    def _format_size(self, size_bytes: Optional[int]) -> str:
        if size_bytes is None:
            return "—"
        size = float(size_bytes)
        for unit in ("Б", "КБ", "МБ", "ГБ"):
            if size < 1024 or unit == "ГБ":
                return f"{size:.0f} {unit}" if unit == "Б" else f"{size:.1f} {unit}"
            size /= 1024
        return f"{size_bytes} Б"
