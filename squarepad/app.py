import customtkinter as ctk

from squarepad.config import AppConfig, DEFAULT_CONFIG
from squarepad.controllers.app_controller import AppController
from squarepad.ui.bottom_bar import BottomBar
from squarepad.ui.preview_panel import PreviewPanel
from squarepad.ui.sidebar import Sidebar


class SquarePadApp(ctk.CTk):
    def __init__(self, config: AppConfig = DEFAULT_CONFIG) -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title("SquarePad: квадрат 1:1")
        self.minsize(640, 480)

        # root layout: previews, right sidebar, bottom status
        self.grid_columnconfigure(0, weight=1)
        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._original_view = PreviewPanel(self, title="Оригинал")
        self._original_view.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._square_view = PreviewPanel(self, title="Квадрат 1:1")
        self._square_view.grid(row=0, column=1, sticky="nsew", padx=6, pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=2, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, columnspan=3, sticky="ew", padx=12, pady=(0, 12))

        self._controller = AppController(
            original_view=self._original_view,
            square_view=self._square_view,
            sidebar=self._sidebar,
            bottom=self._bottom,
            window=self,
            config=config,
        )
        self._controller.bind_events()

    def open_path(self, file_path: str) -> None:
        self._controller.open_path(file_path)
