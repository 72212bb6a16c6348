"""Панель превью: заголовок, канва с изображением и строка описания.

Принципы:
- SRP: отвечает только за показ готового изображения, без вычислений.
- Чистый код: чёткое разделение публичного API и внутренних обработчиков событий.
"""
from __future__ import annotations

from typing import Optional

import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageTk

from squarepad.services.layout_service import fit_rect


class PreviewPanel(ctk.CTkFrame):
    """Показывает изображение по центру канвы, уменьшая его до размеров панели."""
    def __init__(self, master: ctk.CTk | tk.Misc, title: str, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(1, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._title = ctk.CTkLabel(self, text=title, font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._canvas = tk.Canvas(self, highlightthickness=0, bg=self._get_canvas_bg())
        self._canvas.grid(row=1, column=0, sticky="nsew", padx=8)

        self._info_val = ctk.StringVar(value="")
        self._info = ctk.CTkLabel(self, textvariable=self._info_val, anchor="w", justify="left", wraplength=360)
        self._info.grid(row=2, column=0, padx=8, pady=(4, 8), sticky="ew")

        self._image: Optional[Image.Image] = None
        self._tk_image: Optional[ImageTk.PhotoImage] = None

        self._canvas.bind("<Configure>", self._on_canvas_resize)

    # ---- Public API ----
    def show(self, image: Optional[Image.Image], info: str) -> None:
        """Устанавливает изображение и текст описания и перерисовывает канву."""
        self._image = image
        self._info_val.set(info)
        self._render_image()

    def clear(self) -> None:
        self._image = None
        self._tk_image = None
        self._info_val.set("")
        self._canvas.delete("all")

    def get_container_width(self) -> int:
        """Текущая ширина области рисования, px (0 до первой отрисовки окна)."""
        return int(self._canvas.winfo_width())

    # ---- Internals ----
    def _on_canvas_resize(self, _event: tk.Event) -> None:
        if self._image is None:
            return
        self._render_image()

    def _render_image(self) -> None:
        self._canvas.delete("all")
        if self._image is None:
            return

        canvas_w = max(1, int(self._canvas.winfo_width()))
        canvas_h = max(1, int(self._canvas.winfo_height()))
        img_w, img_h = self._image.size

        draw_img = self._image
        if img_w > canvas_w or img_h > canvas_h:
            fit = fit_rect(img_w, img_h, min(canvas_w, canvas_h), canvas_w)
            draw_img = self._image.resize((fit.display_width, fit.display_height), Image.Resampling.LANCZOS)

        x = (canvas_w - draw_img.width) // 2
        y = (canvas_h - draw_img.height) // 2
        self._tk_image = ImageTk.PhotoImage(draw_img)
        self._canvas.create_image(x, y, image=self._tk_image, anchor="nw")

    def _get_canvas_bg(self) -> str:
        # CTk does not expose canvas theme, so pick neutral
        return "#1f1f1f" if ctk.get_appearance_mode().lower() == "dark" else "#f2f2f2"
