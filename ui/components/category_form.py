import customtkinter as ctk
from services.category_service import CategoryService
from services.errors import ValidationError
from models.category import Category
from utils.constants import COLOR_PALETTE


class CategoryForm(ctk.CTkToplevel):
    """Add or edit a category: a name field and a row of palette swatches."""

    def __init__(
        self,
        master,
        category_service: CategoryService,
        category: Category | None = None,
        **kwargs,
    ):
        super().__init__(master, **kwargs)
        self._svc = category_service
        self._category = category
        self.saved = False

        self.title("Edit Category" if category else "Add Category")
        self.resizable(False, False)
        self.grid_columnconfigure(1, weight=1)

        r = 0

        # Name
        ctk.CTkLabel(self, text="Name:").grid(
            row=r, column=0, padx=(16, 8), pady=(16, 4), sticky="e"
        )
        self._name_var = ctk.StringVar(value=category.name if category else "")
        name_entry = ctk.CTkEntry(self, textvariable=self._name_var, width=240)
        name_entry.grid(row=r, column=1, padx=(0, 16), pady=(16, 4), sticky="ew")
        name_entry.bind("<Return>", lambda e: self._on_save())
        r += 1

        # Color
        ctk.CTkLabel(self, text="Color:").grid(
            row=r, column=0, padx=(16, 8), pady=4, sticky="ne"
        )
        palette = ctk.CTkFrame(self, fg_color="transparent")
        palette.grid(row=r, column=1, padx=(0, 16), pady=4, sticky="w")
        self._color = category.color if category else COLOR_PALETTE[0]
        self._swatches: dict[str, ctk.CTkButton] = {}
        for i, color in enumerate(COLOR_PALETTE):
            swatch = ctk.CTkButton(
                palette, text="", width=28, height=28, corner_radius=14,
                fg_color=color, hover_color=color, border_color=("gray10", "gray90"),
                command=lambda c=color: self._select_color(c),
            )
            swatch.grid(row=i // 5, column=i % 5, padx=3, pady=3)
            self._swatches[color] = swatch
        self._select_color(self._color)
        r += 1

        # Error
        self._error_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._error_var,
            text_color="#F44336", wraplength=300, anchor="w",
        ).grid(row=r, column=0, columnspan=2, padx=16, pady=(0, 4), sticky="ew")
        r += 1

        # Buttons
        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=r, column=0, columnspan=2, padx=16, pady=(4, 16), sticky="ew")
        ctk.CTkButton(
            btn_frame, text="Cancel", width=90,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self.destroy,
        ).pack(side="left")
        ctk.CTkButton(btn_frame, text="Save", width=90, command=self._on_save).pack(side="right")

        self.transient(master)
        self.grab_set()
        self._center()
        name_entry.focus_set()

    def _select_color(self, color: str):
        self._color = color
        for c, swatch in self._swatches.items():
            swatch.configure(border_width=3 if c == color else 0)

    def _on_save(self):
        try:
            if self._category:
                self._svc.update(self._category.id, self._name_var.get(), self._color)
            else:
                self._svc.add(self._name_var.get(), self._color)
            self.saved = True
            self.destroy()
        except ValidationError as e:
            self._error_var.set(str(e))

    def _center(self):
        self.update_idletasks()
        mw = self.master.winfo_x() + self.master.winfo_width() // 2
        mh = self.master.winfo_y() + self.master.winfo_height() // 2
        w, h = self.winfo_reqwidth(), self.winfo_reqheight()
        self.geometry(f"+{mw - w//2}+{mh - h//2}")
