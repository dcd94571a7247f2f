# signupkit/gui.py
# Desktop signup window: live strength meter, checklist, email availability, drafts

import sys
import typing
from functools import partial

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QClipboard
from PySide6.QtWidgets import (
    QApplication, QWidget, QHBoxLayout, QVBoxLayout, QLabel, QLineEdit,
    QPushButton, QCheckBox, QGroupBox, QGridLayout, QMessageBox, QProgressBar,
    QStackedWidget, QListWidget, QListWidgetItem,
)

from signupkit.availability import status_text
from signupkit.config import load_config, configure_logging, seconds
from signupkit.drafts import DraftStore
from signupkit.errors import StorageError
from signupkit.form import SignupForm
from signupkit.generator import generate_signup_password
from signupkit.routes import ROUTES, page_title, needs_leave_confirmation
from signupkit.strength import CRITERIA, Tier
from signupkit.suggestions import hints_for

CFG = load_config()

CRITERIA_LABELS = {
    "length": "At least 12 characters",
    "upper": "Uppercase letter",
    "lower": "Lowercase letter",
    "digit": "Number",
    "symbol": "Symbol",
    "common": "Not a common password",
}

# ---------------- UI building helpers ----------------

def make_form_group():
    box = QGroupBox("Create Account")
    layout = QGridLayout()
    box.setLayout(layout)

    input_email = QLineEdit()
    lbl_email_status = QLabel("")
    lbl_email_error = QLabel("")

    input_pw = QLineEdit()
    input_pw.setEchoMode(QLineEdit.Password)
    btn_toggle = QPushButton("Show")
    btn_generate = QPushButton("Generate")
    meter = QProgressBar()
    meter.setRange(0, 100)
    meter.setTextVisible(True)
    list_criteria = QListWidget()
    list_criteria.setMaximumHeight(140)
    lbl_hints = QLabel("")
    lbl_hints.setWordWrap(True)
    lbl_pw_error = QLabel("")

    input_confirm = QLineEdit()
    input_confirm.setEchoMode(QLineEdit.Password)
    lbl_confirm_error = QLabel("")

    chk_terms = QCheckBox("I accept the terms")
    lbl_terms_error = QLabel("")

    btn_submit = QPushButton("Create account")

    for lbl in (lbl_email_error, lbl_pw_error, lbl_confirm_error, lbl_terms_error):
        lbl.setStyleSheet(f"color: {Tier.LOW.color}")

    layout.addWidget(QLabel("Email:"), 0, 0)
    layout.addWidget(input_email, 0, 1, 1, 2)
    layout.addWidget(lbl_email_status, 1, 1, 1, 2)
    layout.addWidget(lbl_email_error, 2, 1, 1, 2)
    layout.addWidget(QLabel("Password:"), 3, 0)
    layout.addWidget(input_pw, 3, 1)
    row = QHBoxLayout()
    row.addWidget(btn_toggle)
    row.addWidget(btn_generate)
    layout.addLayout(row, 3, 2)
    layout.addWidget(meter, 4, 1, 1, 2)
    layout.addWidget(list_criteria, 5, 1, 1, 2)
    layout.addWidget(lbl_hints, 6, 1, 1, 2)
    layout.addWidget(lbl_pw_error, 7, 1, 1, 2)
    layout.addWidget(QLabel("Confirm:"), 8, 0)
    layout.addWidget(input_confirm, 8, 1, 1, 2)
    layout.addWidget(lbl_confirm_error, 9, 1, 1, 2)
    layout.addWidget(chk_terms, 10, 1, 1, 2)
    layout.addWidget(lbl_terms_error, 11, 1, 1, 2)
    layout.addWidget(btn_submit, 12, 1, 1, 2)

    items = {}
    for key in CRITERIA:
        item = QListWidgetItem(CRITERIA_LABELS[key])
        list_criteria.addItem(item)
        items[key] = item

    return {
        "widget": box,
        "input_email": input_email,
        "lbl_email_status": lbl_email_status,
        "input_pw": input_pw,
        "btn_toggle": btn_toggle,
        "btn_generate": btn_generate,
        "meter": meter,
        "criteria_items": items,
        "lbl_hints": lbl_hints,
        "input_confirm": input_confirm,
        "chk_terms": chk_terms,
        "btn_submit": btn_submit,
        "errors": {
            "email": lbl_email_error,
            "password": lbl_pw_error,
            "confirmPassword": lbl_confirm_error,
            "terms": lbl_terms_error,
        },
    }


def make_text_page(heading: str, text: str):
    page = QWidget()
    layout = QVBoxLayout()
    page.setLayout(layout)
    title = QLabel(f"<h2>{heading}</h2>")
    body = QLabel(text)
    body.setWordWrap(True)
    layout.addWidget(title)
    layout.addWidget(body)
    layout.addStretch(1)
    return page


class SignupWindow(QWidget):
    def __init__(self):
        super().__init__()
        self.setMinimumSize(640, 620)
        self.clip_timer: typing.Optional[QTimer] = None

        self.cfg = CFG
        self.form = SignupForm(drafts=DraftStore(self.cfg.get("draft_path")))
        self.current_path = "/"

        # email availability: debounce then simulated latency
        self.email_debounce = QTimer(self)
        self.email_debounce.setSingleShot(True)
        self.email_debounce.setInterval(int(seconds(self.cfg, "debounce_ms") * 1000))
        self.email_debounce.timeout.connect(self.on_email_debounced)

        main = QVBoxLayout()
        self.setLayout(main)

        nav = QHBoxLayout()
        self.nav_buttons = {}
        for path, label in ROUTES.items():
            btn = QPushButton(label)
            btn.setCheckable(True)
            btn.clicked.connect(partial(self.navigate, path))
            nav.addWidget(btn)
            self.nav_buttons[path] = btn
        nav.addStretch(1)
        main.addLayout(nav)

        self.toast = QLabel("")
        self.toast.setVisible(False)
        main.addWidget(self.toast)

        self.stack = QStackedWidget()
        main.addWidget(self.stack, 1)

        home = make_text_page("Welcome", "Create an account to see live password strength feedback.")
        btn_cta = QPushButton("Create account")
        btn_cta.clicked.connect(partial(self.navigate, "/form"))
        home.layout().insertWidget(2, btn_cta)

        self.fg = make_form_group()
        self.pages = {
            "/": home,
            "/form": self.fg["widget"],
            "/about": make_text_page("About", "A signup demo with live validation, password strength scoring and a local draft."),
        }
        for page in self.pages.values():
            self.stack.addWidget(page)

        fg = self.fg
        fg["input_email"].textChanged.connect(self.on_email_changed)
        fg["input_pw"].textChanged.connect(self.on_password_changed)
        fg["input_confirm"].textChanged.connect(self.on_confirm_changed)
        fg["chk_terms"].toggled.connect(self.on_terms_changed)
        fg["btn_toggle"].clicked.connect(self.on_toggle_visibility)
        fg["btn_generate"].clicked.connect(self.on_generate)
        fg["btn_submit"].clicked.connect(self.on_submit)
        fg["input_pw"].installEventFilter(self)

        self.restore_draft()
        self.update_strength("")
        self.navigate("/")

    # ----------------- Routing -----------------
    def navigate(self, path: str, *_):
        if needs_leave_confirmation(self.current_path, path, self.form.dirty):
            confirm = QMessageBox.question(self, "Unsaved changes", "You have unsaved changes. Leave this page?")
            if confirm != QMessageBox.Yes:
                for p, btn in self.nav_buttons.items():
                    btn.setChecked(p == self.current_path)
                return
        self.current_path = path
        self.stack.setCurrentWidget(self.pages[path])
        for p, btn in self.nav_buttons.items():
            btn.setChecked(p == path)
        self.setWindowTitle(page_title(path))

    def closeEvent(self, event):
        if self.form.dirty:
            confirm = QMessageBox.question(self, "Unsaved changes", "You have unsaved changes. Quit anyway?")
            if confirm != QMessageBox.Yes:
                event.ignore()
                return
        event.accept()

    # ----------------- Drafts -----------------
    def restore_draft(self):
        self.form.restore()
        fg = self.fg
        for w in (fg["input_email"], fg["chk_terms"]):
            w.blockSignals(True)
        fg["input_email"].setText(self.form.email)
        fg["chk_terms"].setChecked(self.form.terms)
        for w in (fg["input_email"], fg["chk_terms"]):
            w.blockSignals(False)

    # ----------------- Field handlers -----------------
    def show_error(self, field: str, message: str):
        self.fg["errors"][field].setText(message or "")

    def validate_field(self, field: str):
        self.show_error(field, self.form.validate()[field])

    def save_failed(self, err: StorageError):
        self.show_toast(f"Draft not saved: {err.message}", "error")

    def on_email_changed(self, text: str):
        try:
            self.form.set_email(text)
        except StorageError as e:
            self.save_failed(e)
        self.validate_field("email")
        self.fg["lbl_email_status"].setText("")
        self.email_debounce.stop()
        if self.form.email_check.current() is not None:
            self.email_debounce.start()

    def on_email_debounced(self):
        ticket = self.form.email_check.current()
        if ticket is None:
            return
        self.fg["lbl_email_status"].setText("checking…")
        delay_ms = int(seconds(self.cfg, "availability_delay_ms") * 1000)
        QTimer.singleShot(delay_ms, partial(self.on_email_checked, ticket))

    def on_email_checked(self, ticket: int):
        available = self.form.email_check.resolve(ticket)
        if available is None:
            return
        lbl = self.fg["lbl_email_status"]
        lbl.setText(status_text(available))
        lbl.setStyleSheet(f"color: {(Tier.HIGH if available else Tier.LOW).color}")

    def on_password_changed(self, text: str):
        self.form.set_password(text)
        self.update_strength(text)
        self.validate_field("password")
        if self.form.confirm:
            self.validate_field("confirmPassword")

    def on_confirm_changed(self, text: str):
        self.form.set_confirm(text)
        self.validate_field("confirmPassword")

    def on_terms_changed(self, checked: bool):
        try:
            self.form.set_terms(checked)
        except StorageError as e:
            self.save_failed(e)
        self.validate_field("terms")

    def update_strength(self, _text: str):
        report = self.form.strength()
        fg = self.fg
        fg["meter"].setValue(report.percent)
        fg["meter"].setStyleSheet(f"QProgressBar::chunk {{ background: {report.tier.color}; }}")
        for key, ok in report.criteria.items():
            item = fg["criteria_items"][key]
            item.setCheckState(Qt.Checked if ok else Qt.Unchecked)
        fg["lbl_hints"].setText("\n".join("• " + h for h in hints_for(report)))

    def on_toggle_visibility(self):
        pw = self.fg["input_pw"]
        showing = pw.echoMode() == QLineEdit.Normal
        pw.setEchoMode(QLineEdit.Password if showing else QLineEdit.Normal)
        self.fg["btn_toggle"].setText("Show" if showing else "Hide")

    def eventFilter(self, obj, event):
        if obj is self.fg["input_pw"] and event.type() == event.Type.KeyPress:
            if event.key() == Qt.Key_CapsLock or (event.text().isupper() and not event.modifiers() & Qt.ShiftModifier):
                self.show_toast("Caps Lock is ON", "warn")
        return super().eventFilter(obj, event)

    # ----------------- Generate / clipboard -----------------
    def on_generate(self):
        pw = generate_signup_password()
        self.fg["input_pw"].setText(pw)
        try:
            clipboard: QClipboard = QApplication.clipboard()
            clipboard.setText(pw, mode=QClipboard.Clipboard)
        except RuntimeError:
            return
        self.start_clipboard_clear_timer(int(self.cfg.get("clipboard_clear_seconds", 20)))
        self.show_toast("Generated password copied to clipboard", "ok")

    def start_clipboard_clear_timer(self, seconds_: int):
        if self.clip_timer and self.clip_timer.isActive():
            self.clip_timer.stop()
        self.clip_timer = QTimer(self)
        self.clip_timer.setSingleShot(True)
        self.clip_timer.timeout.connect(self.clear_clipboard)
        self.clip_timer.start(seconds_ * 1000)

    def clear_clipboard(self):
        QApplication.clipboard().setText("", mode=QClipboard.Clipboard)

    # ----------------- Toasts -----------------
    def show_toast(self, message: str, kind: str = "ok"):
        tier = {"ok": Tier.HIGH, "warn": Tier.MID}.get(kind, Tier.LOW)
        self.toast.setText(message)
        self.toast.setStyleSheet(f"color: {tier.color}; padding: 8px 12px;")
        self.toast.setVisible(True)
        QTimer.singleShot(int(self.cfg.get("toast_seconds", 3)) * 1000, partial(self.toast.setVisible, False))

    # ----------------- Submit -----------------
    def on_submit(self):
        errors = self.form.validate()
        for field, msg in errors.items():
            self.show_error(field, msg)
        if any(errors.values()):
            return
        btn = self.fg["btn_submit"]
        btn.setEnabled(False)
        btn.setText("Creating...")
        QTimer.singleShot(int(seconds(self.cfg, "submit_delay_ms") * 1000), self.finish_submit)

    def finish_submit(self):
        result = self.form.complete()
        fg = self.fg
        for w in (fg["input_email"], fg["input_pw"], fg["input_confirm"], fg["chk_terms"]):
            w.blockSignals(True)
        fg["input_email"].clear()
        fg["input_pw"].clear()
        fg["input_confirm"].clear()
        fg["chk_terms"].setChecked(False)
        for w in (fg["input_email"], fg["input_pw"], fg["input_confirm"], fg["chk_terms"]):
            w.blockSignals(False)
        fg["lbl_email_status"].setText("")
        for field in fg["errors"]:
            self.show_error(field, "")
        self.update_strength("")
        fg["btn_submit"].setEnabled(True)
        fg["btn_submit"].setText("Create account")
        self.show_toast(result["message"], "ok")


def main():
    configure_logging(CFG.get("log_level"))
    app = QApplication(sys.argv)
    win = SignupWindow()
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
