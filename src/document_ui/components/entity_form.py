"""Add/edit dialog used by the client and catalog screens."""

import reflex as rx


def form_dialog(state: type, fields: list[tuple[str, str, str]]) -> rx.Component:
    """
    Build a controlled add/edit dialog.

    Args:
        state: State exposing dialog_open, dialog_title, form,
            set_dialog_open, set_form_field and save.
        fields: (name, label, input type) for each form field.
    """
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title(state.dialog_title),
            rx.vstack(
                *[_field(state, name, label, input_type) for name, label, input_type in fields],
                rx.hstack(
                    rx.dialog.close(rx.button("Cancel", variant="soft", color_scheme="gray")),
                    rx.button("Save", on_click=state.save),
                    justify="end",
                    width="100%",
                ),
                spacing="3",
            ),
        ),
        open=state.dialog_open,
        on_open_change=state.set_dialog_open,
    )


def _field(state: type, name: str, label: str, input_type: str) -> rx.Component:
    control = (
        rx.text_area(value=state.form[name], on_change=lambda value: state.set_form_field(name, value))
        if input_type == "textarea"
        else rx.input(
            value=state.form[name],
            type=input_type,
            on_change=lambda value: state.set_form_field(name, value),
        )
    )
    return rx.box(
        rx.text(label, as_="label", size="2", weight="medium"),
        control,
        width="100%",
    )


def row_actions(on_edit, on_delete) -> rx.Component:
    return rx.hstack(
        rx.icon_button(rx.icon("pencil", size=16), variant="ghost", on_click=on_edit),
        rx.icon_button(rx.icon("trash-2", size=16), variant="ghost", color_scheme="red", on_click=on_delete),
        spacing="1",
    )
