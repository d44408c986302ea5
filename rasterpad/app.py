"""Tk front end: a drawing view with polygon, transform and file tools."""

from __future__ import annotations

import argparse
import os
import tkinter as tk
from collections.abc import Sequence
from tkinter import colorchooser, filedialog, messagebox, ttk

from .canvas import Canvas, LineAlgorithm, ShearAxis
from .editor import Editor, MouseButton, Tool

APP_NAME = "ImageViewer"
DEFAULT_SIZE = 500
FILE_TYPES = (
    ("Image data", "*.bmp *.gif *.jpg *.jpeg *.png *.pbm *.pgm *.ppm *.xbm *.xpm"),
    ("All files", "*"),
)
LINE_ALGORITHM_NAMES = ("DDA", "Bresenham", "Circle")
SHEAR_AXIS_NAMES = ("X", "Y")


def color_to_hex(color: Sequence[int]) -> str:
    """Format an (r, g, b) or (r, g, b, a) colour as ``#rrggbb``."""
    if len(color) not in (3, 4):
        raise ValueError(f"colour needs 3 or 4 components, got {len(color)}")
    r, g, b = color[:3]
    if not all(0 <= c <= 255 for c in (r, g, b)):
        raise ValueError(f"colour components must lie in 0..255: {tuple(color)}")
    return f"#{r:02x}{g:02x}{b:02x}"


class ViewerApp:
    """Main window wiring widgets and mouse events to an :class:`Editor`."""

    def __init__(self, root: tk.Tk, editor: Editor) -> None:
        self.root = root
        self.editor = editor
        self.settings: dict[str, str] = {}
        self._photo = None

        root.title(APP_NAME)
        root.protocol("WM_DELETE_WINDOW", self.close)
        self._build_menu()
        self._build_tools()
        self._build_view()
        self._refresh()

    # Layout

    def _build_menu(self) -> None:
        menubar = tk.Menu(self.root)
        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="Open...", command=self.open_image_dialog)
        file_menu.add_command(label="Save as...", command=self.save_image_dialog)
        file_menu.add_command(label="Clear", command=self.clear)
        file_menu.add_separator()
        file_menu.add_command(label="Exit", command=self.close)
        menubar.add_cascade(label="File", menu=file_menu)
        self.root.config(menu=menubar)

    def _build_tools(self) -> None:
        tools = ttk.Frame(self.root, padding=6)
        tools.pack(side=tk.LEFT, fill=tk.Y)

        self._tool = tk.StringVar(value=self.editor.tool.value)
        for tool in Tool:
            ttk.Radiobutton(
                tools, text=tool.value.capitalize(), value=tool.value,
                variable=self._tool, command=self._sync,
            ).pack(anchor=tk.W)

        ttk.Label(tools, text="Line algorithm").pack(anchor=tk.W, pady=(8, 0))
        self._algorithm = ttk.Combobox(tools, values=LINE_ALGORITHM_NAMES, state="readonly")
        self._algorithm.current(int(self.editor.line_algorithm))
        self._algorithm.bind("<<ComboboxSelected>>", lambda _event: self._sync())
        self._algorithm.pack(fill=tk.X)

        self._color_button = tk.Button(
            tools, text="Color", command=self.choose_color,
            bg=color_to_hex(self.editor.color),
        )
        self._color_button.pack(fill=tk.X, pady=(8, 0))

        ttk.Label(tools, text="Rotation (degrees)").pack(anchor=tk.W, pady=(8, 0))
        self._angle = tk.DoubleVar(value=0.0)
        ttk.Spinbox(tools, from_=-360.0, to=360.0, increment=1.0,
                    textvariable=self._angle).pack(fill=tk.X)
        ttk.Button(tools, text="Rotate", command=self.rotate).pack(fill=tk.X)

        ttk.Label(tools, text="Scale X / Y").pack(anchor=tk.W, pady=(8, 0))
        self._scale_x = tk.DoubleVar(value=1.0)
        self._scale_y = tk.DoubleVar(value=1.0)
        for variable in (self._scale_x, self._scale_y):
            ttk.Spinbox(tools, from_=0.0, to=99.99, increment=0.1,
                        textvariable=variable).pack(fill=tk.X)
        ttk.Button(tools, text="Scale", command=self.scale).pack(fill=tk.X)

        ttk.Label(tools, text="Shear").pack(anchor=tk.W, pady=(8, 0))
        self._shear = tk.DoubleVar(value=0.0)
        ttk.Spinbox(tools, from_=-1.0, to=1.0, increment=0.1,
                    textvariable=self._shear).pack(fill=tk.X)
        self._shear_axis = ttk.Combobox(tools, values=SHEAR_AXIS_NAMES, state="readonly")
        self._shear_axis.current(int(ShearAxis.X))
        self._shear_axis.pack(fill=tk.X)
        ttk.Button(tools, text="Shear", command=self.shear).pack(fill=tk.X)

    def _build_view(self) -> None:
        frame = ttk.Frame(self.root)
        frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self._view = tk.Canvas(frame, background="gray25", highlightthickness=0)
        xbar = ttk.Scrollbar(frame, orient=tk.HORIZONTAL, command=self._view.xview)
        ybar = ttk.Scrollbar(frame, orient=tk.VERTICAL, command=self._view.yview)
        self._view.configure(xscrollcommand=xbar.set, yscrollcommand=ybar.set)
        xbar.pack(side=tk.BOTTOM, fill=tk.X)
        ybar.pack(side=tk.RIGHT, fill=tk.Y)
        self._view.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self._image_item = self._view.create_image(0, 0, anchor=tk.NW)

        self._view.bind("<ButtonPress-1>", lambda e: self._press(e, MouseButton.LEFT))
        self._view.bind("<ButtonPress-3>", lambda e: self._press(e, MouseButton.RIGHT))
        self._view.bind("<Motion>", self._motion)

    # Helpers

    def _refresh(self) -> None:
        from PIL import ImageTk

        canvas = self.editor.canvas
        if canvas.is_empty():
            return
        self._photo = ImageTk.PhotoImage(canvas.to_image())
        self._view.itemconfigure(self._image_item, image=self._photo)
        self._view.configure(scrollregion=(0, 0, canvas.width, canvas.height))

    def _sync(self) -> None:
        self.editor.tool = Tool(self._tool.get())
        self.editor.line_algorithm = LineAlgorithm(self._algorithm.current())

    def _read(self, variable: tk.DoubleVar) -> float | None:
        try:
            return variable.get()
        except tk.TclError:
            messagebox.showwarning(APP_NAME, "Please enter a number.", parent=self.root)
            return None

    def _event_point(self, event: tk.Event) -> tuple[int, int]:
        return int(self._view.canvasx(event.x)), int(self._view.canvasy(event.y))

    def _press(self, event: tk.Event, button: MouseButton) -> None:
        self._sync()
        self.editor.press(*self._event_point(event), button)
        self._refresh()

    def _motion(self, event: tk.Event) -> None:
        if self.editor.canvas.dragging_polygon:
            self.editor.move(*self._event_point(event))
            self._refresh()

    # Commands

    def rotate(self) -> None:
        angle = self._read(self._angle)
        if angle is None:
            return
        self._sync()
        try:
            self.editor.rotate(angle)
        except ValueError as exc:
            messagebox.showwarning(APP_NAME, str(exc), parent=self.root)
        self._refresh()

    def scale(self) -> None:
        sx, sy = self._read(self._scale_x), self._read(self._scale_y)
        if sx is None or sy is None:
            return
        self.editor.scale(sx, sy)
        self._refresh()

    def shear(self) -> None:
        factor = self._read(self._shear)
        if factor is None:
            return
        self.editor.shear(factor, ShearAxis(self._shear_axis.current()))
        self._refresh()

    def clear(self) -> None:
        self.editor.clear()
        self._refresh()

    def choose_color(self) -> None:
        rgb, _ = colorchooser.askcolor(
            color=color_to_hex(self.editor.color), parent=self.root
        )
        if rgb is None:
            return
        self.editor.color = (*(int(c) for c in rgb), 255)
        self._color_button.configure(bg=color_to_hex(self.editor.color))

    def open_image_dialog(self) -> None:
        filename = filedialog.askopenfilename(
            parent=self.root, title="Load image",
            initialdir=self.settings.get("folder_img_load_path", ""),
            filetypes=FILE_TYPES,
        )
        if not filename:
            return
        self.settings["folder_img_load_path"] = os.path.dirname(os.path.abspath(filename))
        try:
            self.editor.open_image(filename)
        except (OSError, ValueError):
            messagebox.showwarning(APP_NAME, "Unable to open image.", parent=self.root)
            return
        self._refresh()

    def save_image_dialog(self) -> None:
        filename = filedialog.asksaveasfilename(
            parent=self.root, title="Save image",
            initialdir=self.settings.get("folder_img_save_path", ""),
            filetypes=FILE_TYPES,
        )
        if not filename:
            return
        self.settings["folder_img_save_path"] = os.path.dirname(os.path.abspath(filename))
        try:
            self.editor.save_image(filename)
        except (OSError, ValueError):
            messagebox.showwarning(APP_NAME, "Unable to save image.", parent=self.root)
        else:
            messagebox.showinfo(APP_NAME, f"File {filename} saved.", parent=self.root)

    def close(self) -> None:
        if messagebox.askyesno(
            "Close Confirmation", "Are you sure you want to exit?", parent=self.root
        ):
            self.root.destroy()


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="rasterpad", description="Raster polygon editor.")
    parser.add_argument("--width", type=int, default=DEFAULT_SIZE, help="canvas width")
    parser.add_argument("--height", type=int, default=DEFAULT_SIZE, help="canvas height")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("canvas size must be positive")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Start the editor window."""
    args = _parse_args(argv)
    root = tk.Tk()
    ViewerApp(root, Editor(Canvas(args.width, args.height)))
    root.mainloop()
    return 0