"""
Unit Converter Panel
"""
from typing import List, Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QFormLayout, QComboBox, QLineEdit, QLabel, QPushButton
)
from PySide6.QtCore import Qt

from calcconverter.model.conversions import CATEGORY_LABELS, UnitOption
from calcconverter.model.converter import ConverterState, UnitConverter


class ConverterPanel(QWidget):
    def __init__(self, state: ConverterState, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.converter = UnitConverter(state, sink=self)

        layout = QVBoxLayout(self)

        # --- Inputs ---
        grp = QGroupBox("تحويل الوحدات / Unit Converter")
        form = QFormLayout(grp)

        self.category_combo = QComboBox()
        self.category_combo.setObjectName("category")
        for category, label in CATEGORY_LABELS.items():
            self.category_combo.addItem(label, category.value)
        self.category_combo.setCurrentIndex(self.category_combo.findData(state.category.value))
        form.addRow("الفئة / Category:", self.category_combo)

        self.input_edit = QLineEdit(state.input_text)
        self.input_edit.setObjectName("inputValue")
        form.addRow("القيمة / Value:", self.input_edit)

        self.from_combo = QComboBox()
        self.from_combo.setObjectName("fromUnit")
        form.addRow("من / From:", self.from_combo)

        self.to_combo = QComboBox()
        self.to_combo.setObjectName("toUnit")
        form.addRow("إلى / To:", self.to_combo)

        layout.addWidget(grp)

        # --- Result ---
        self.lbl_result = QLabel("0")
        self.lbl_result.setObjectName("conversionResult")
        self.lbl_result.setAlignment(Qt.AlignCenter)
        self.lbl_result.setTextInteractionFlags(Qt.TextSelectableByMouse)
        layout.addWidget(self.lbl_result)

        self.btn_clear = QPushButton("مسح / Clear")
        self.btn_clear.setObjectName("clearConverter")
        layout.addWidget(self.btn_clear)

        layout.addStretch()

        # --- SIGNAL CONNECTIONS ---
        self.category_combo.currentIndexChanged.connect(self.on_category_changed)
        self.input_edit.textChanged.connect(self.converter.set_input)
        self.from_combo.currentIndexChanged.connect(self.on_from_changed)
        self.to_combo.currentIndexChanged.connect(self.on_to_changed)
        self.btn_clear.clicked.connect(self.converter.clear)

        # Populate units and perform the initial conversion
        self.converter.start()

    # --- ConverterSink ---

    def show_units(self, options: List[UnitOption], from_index: int, to_index: int) -> None:
        # Repopulating must not trigger a conversion per inserted item
        for combo, index in ((self.from_combo, from_index), (self.to_combo, to_index)):
            combo.blockSignals(True)
            try:
                combo.clear()
                for option in options:
                    combo.addItem(option.label, option.key)
                combo.setCurrentIndex(index)
            finally:
                combo.blockSignals(False)

    def show_input(self, text: str) -> None:
        self.input_edit.blockSignals(True)
        try:
            self.input_edit.setText(text)
        finally:
            self.input_edit.blockSignals(False)

    def show_result(self, text: str) -> None:
        self.lbl_result.setText(text)

    # --- SLOTS ---

    def on_category_changed(self, index: int) -> None:
        self.converter.select_category(self.category_combo.itemData(index))

    def on_from_changed(self, index: int) -> None:
        self.converter.set_from_unit(self.from_combo.itemData(index))

    def on_to_changed(self, index: int) -> None:
        self.converter.set_to_unit(self.to_combo.itemData(index))
