"""Reactive state for the Market Console pages.

Each grid owns its records and an immutable table view (stored as a plain
dict so Reflex can serialise it). Computed vars re-derive the rendered rows
through ``table.derive`` whenever records or view change. All API calls
happen in async event handlers; failures become a single toast.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

import reflex as rx

from . import forms, mutations, table
from .entities import BUYERS, FIELDS, SELLERS, EntitySchema, MutationStrategy, Operation
from .exceptions import FetchError, FormValidationError, MutationError
from .row_actions import IntentKind, resolve

logger = logging.getLogger(__name__)


# =========================================================================
# GENERIC GRID
# =========================================================================

class EntityTableState(rx.State, mixin=True):
    """Records + view state for one entity grid."""

    schema: ClassVar[EntitySchema]

    records: list[dict[str, str]] = []
    loading: bool = True
    view: dict[str, Any] = table.ViewState().as_dict()

    # --- Delete confirmation ---
    delete_open: bool = False
    delete_id: str = ""
    delete_prompt: str = ""
    deleting: bool = False

    # =====================================================================
    # HELPERS
    # =====================================================================

    def _view(self) -> table.ViewState:
        return table.ViewState.from_dict(self.view)

    def _set_view(self, view: table.ViewState) -> None:
        self.view = view.as_dict()

    def _derive(self) -> table.TableView:
        return table.derive(
            self.records,
            self.schema.columns,
            table.ViewState.from_dict(self.view),
            self.schema.search_fields,
            self.schema.id_field,
        )

    def _column(self, key: str) -> table.Column | None:
        return table.find_column(self.schema.columns, key)

    # =====================================================================
    # COMPUTED VARS
    # =====================================================================

    @rx.var(cache=True, deps=["records", "view"])
    def page_rows(self) -> list[dict[str, Any]]:
        """Rows of the current page: id, selected flag and visible cell values."""
        derived = self._derive()
        selected = set(self.view.get("selected") or [])
        return [
            {
                "id": row_id,
                "selected": row_id in selected,
                "cells": [str(col.accessor(row)) for col in derived.visible_columns],
            }
            for row, row_id in zip(derived.rows, derived.row_ids)
        ]

    @rx.var(cache=True, deps=["view"])
    def visible_columns(self) -> list[dict[str, str]]:
        view = table.ViewState.from_dict(self.view)
        active = view.sorting[0] if view.sorting else None
        return [
            {
                "key": col.key,
                "label": col.label,
                "sortable": "true" if col.sortable else "",
                "sort": active.direction.value if active and active.column == col.key else "",
            }
            for col in table.visible_columns(self.schema.columns, view)
        ]

    @rx.var(cache=True, deps=["view"])
    def hideable_columns(self) -> list[dict[str, Any]]:
        hidden = {k for k, v in (self.view.get("column_visibility") or {}).items() if not v}
        return [
            {"key": col.key, "label": col.label, "visible": col.key not in hidden}
            for col in table.hideable_columns(self.schema.columns)
        ]

    @rx.var(cache=True, deps=["records", "view"])
    def filtered_count(self) -> int:
        return self._derive().filtered_count

    @rx.var(cache=True, deps=["records", "view"])
    def selection_summary(self) -> str:
        derived = self._derive()
        return table.selection_summary(derived.selected_count, derived.filtered_count)

    @rx.var(cache=True, deps=["records", "view", "loading"])
    def placeholder(self) -> str:
        return table.placeholder(self.loading, self._derive().filtered_count)

    @rx.var(cache=True, deps=["records", "view"])
    def can_previous(self) -> bool:
        return self._derive().can_previous

    @rx.var(cache=True, deps=["records", "view"])
    def can_next(self) -> bool:
        return self._derive().can_next

    @rx.var(cache=True, deps=["records", "view"])
    def all_page_rows_selected(self) -> bool:
        return self._derive().all_page_rows_selected

    @rx.var(cache=True, deps=["records", "view"])
    def some_page_rows_selected(self) -> bool:
        return self._derive().some_page_rows_selected

    @rx.var(cache=True)
    def search_text(self) -> str:
        return self.view.get("global_filter", "") or ""

    @rx.var(cache=True)
    def column_count(self) -> int:
        """Visible data columns plus the selection and action columns."""
        hidden = {k for k, v in (self.view.get("column_visibility") or {}).items() if not v}
        return len([c for c in self.schema.columns if c.key not in hidden]) + 2

    # =====================================================================
    # LOADING
    # =====================================================================

    async def _fetch_records(self) -> str:
        """Replace the owned records from the API; return an error message or ""."""
        self.loading = True
        try:
            records = await mutations.load_collection(self.schema)
        except FetchError as e:
            logger.warning(f"Fetching {self.schema.plural} failed: {e}")
            return e.message
        finally:
            self.loading = False
        self.records = records
        view = table.clear_selection(self._view())
        self._set_view(table.clamp_page(view, len(records)))
        return ""

    async def load_records(self):
        """Page on_load: fetch the collection once."""
        self.view = table.ViewState().as_dict()
        self.delete_open = False
        self.loading = True
        yield
        error = await self._fetch_records()
        if error:
            yield rx.toast.error(error)

    # =====================================================================
    # VIEW EVENTS
    # =====================================================================

    def set_search(self, value: str):
        self._set_view(table.set_global_filter(self._view(), value))

    def toggle_sort(self, key: str):
        column = self._column(key)
        if column is not None:
            self._set_view(table.toggle_sort(self._view(), column))

    def next_page(self):
        self._set_view(table.next_page(self._view(), self._derive().filtered_count))

    def previous_page(self):
        self._set_view(table.previous_page(self._view()))

    def toggle_row(self, row_id: str, checked: bool):
        self._set_view(table.set_row_selected(self._view(), row_id, checked))

    def toggle_page_rows(self, checked: bool):
        self._set_view(table.set_rows_selected(self._view(), self._derive().row_ids, checked))

    def set_column_visible(self, key: str, visible: bool):
        column = self._column(key)
        if column is not None:
            self._set_view(table.set_column_visible(self._view(), column, visible))

    # =====================================================================
    # ROW ACTIONS
    # =====================================================================

    def run_row_action(self, action: str, row_id: str):
        record = mutations.find_record(self.records, row_id, self.schema.id_field)
        if record is None:
            return rx.toast.error(f"{self.schema.title} not found")
        intent = resolve(self.schema, action, record)
        if intent.kind is IntentKind.NAVIGATE:
            return rx.redirect(intent.target)
        if intent.kind is IntentKind.CONFIRM_DELETE:
            self.delete_id = intent.record_id
            self.delete_prompt = self.schema.describe_delete(record)
            self.delete_open = True
            return None
        self._open_edit(record)

    def _open_edit(self, record: dict[str, str]) -> None:
        """Grids with an edit dialog override this."""

    # =====================================================================
    # DELETE
    # =====================================================================

    def _close_delete(self) -> None:
        self.delete_open = False
        self.delete_id = ""
        self.delete_prompt = ""

    def on_delete_open_change(self, is_open: bool):
        if not is_open and not self.deleting:
            self._close_delete()

    def cancel_delete(self):
        if not self.deleting:
            self._close_delete()

    async def confirm_delete(self):
        if not self.delete_id or self.deleting:
            return
        self.deleting = True
        yield

        schema = self.schema
        try:
            self.records = await mutations.confirm_delete(schema, self.records, self.delete_id)
        except MutationError as e:
            self.deleting = False
            if schema.close_delete_on_failure:
                self._close_delete()
            yield rx.toast.error(e.message)
            return

        self.deleting = False
        self._close_delete()
        self._set_view(table.clamp_page(self._view(), self._derive().filtered_count))
        yield rx.toast.success(schema.success_message(Operation.DELETE))

        if schema.delete_strategy is MutationStrategy.REFETCH:
            error = await self._fetch_records()
            if error:
                yield rx.toast.error(error)


class BuyersState(EntityTableState, rx.State):
    schema: ClassVar[EntitySchema] = BUYERS


class SellersState(EntityTableState, rx.State):
    schema: ClassVar[EntitySchema] = SELLERS


class FieldsState(EntityTableState, rx.State):
    """Fields grid plus its add and edit dialogs."""

    schema: ClassVar[EntitySchema] = FIELDS

    # --- Add dialog ---
    add_open: bool = False
    add_title: str = ""
    add_description: str = ""
    add_category: str = ""
    add_type: str = ""
    adding: bool = False

    # --- Edit dialog ---
    edit_open: bool = False
    edit_id: str = ""
    edit_title: str = ""
    edit_description: str = ""
    edit_category: str = ""
    edit_type: str = ""
    saving: bool = False

    # =====================================================================
    # EXPLICIT SETTERS
    # =====================================================================

    def set_add_open(self, value: bool):
        self.add_open = value

    def set_add_title(self, value: str):
        self.add_title = value

    def set_add_description(self, value: str):
        self.add_description = value

    def set_add_category(self, value: str):
        self.add_category = value

    def choose_add_type(self, value: str):
        """Checkbox group acting as a radio: the clicked option wins."""
        self.add_type = value

    def set_edit_title(self, value: str):
        self.edit_title = value

    def set_edit_description(self, value: str):
        self.edit_description = value

    def set_edit_category(self, value: str):
        self.edit_category = value

    def choose_edit_type(self, value: str):
        self.edit_type = value

    def on_edit_open_change(self, is_open: bool):
        if not is_open:
            self._close_edit()

    # =====================================================================
    # ADD
    # =====================================================================

    def _clear_add(self) -> None:
        self.add_title = ""
        self.add_description = ""
        self.add_category = ""
        self.add_type = ""

    async def submit_add(self):
        if self.adding:
            return
        self.adding = True
        yield

        payload = forms.field_payload({
            "title": self.add_title,
            "description": self.add_description,
            "category": self.add_category,
            "type": self.add_type,
        })
        try:
            await mutations.create_entity(self.schema, payload)
        except MutationError as e:
            self.adding = False
            yield rx.toast.error(e.message)
            return

        self.adding = False
        self.add_open = False
        self._clear_add()
        yield rx.toast.success(self.schema.success_message(Operation.ADD))

        error = await self._fetch_records()
        if error:
            yield rx.toast.error(error)

    # =====================================================================
    # EDIT
    # =====================================================================

    def _open_edit(self, record: dict[str, str]) -> None:
        values = forms.field_values(record)
        self.edit_id = record.get(self.schema.id_field, "")
        self.edit_title = values["title"]
        self.edit_description = values["description"]
        self.edit_category = values["category"]
        self.edit_type = values["type"]
        self.edit_open = True

    def _close_edit(self) -> None:
        self.edit_open = False
        self.edit_id = ""

    async def submit_edit(self):
        if self.saving or not self.edit_id:
            return
        original = mutations.find_record(self.records, self.edit_id, self.schema.id_field)
        if original is None:
            self._close_edit()
            yield rx.toast.error(self.schema.failure_message(Operation.UPDATE))
            return

        record = {
            **original,
            **forms.field_payload({
                "title": self.edit_title,
                "description": self.edit_description,
                "category": self.edit_category,
                "type": self.edit_type,
            }),
        }
        # The dialog closes on save whatever the outcome.
        self.saving = True
        self._close_edit()
        yield

        try:
            self.records = await mutations.save_edit(self.schema, self.records, record)
        except MutationError as e:
            yield rx.toast.error(e.message)
            return
        finally:
            self.saving = False
        yield rx.toast.success(self.schema.success_message(Operation.UPDATE))


# =========================================================================
# BUYER / SELLER FORM PAGES
# =========================================================================

class ContactFormState(rx.State, mixin=True):
    """Add/edit page for a buyer or seller."""

    schema: ClassVar[EntitySchema]

    editing_id: str = ""
    form_name: str = ""
    form_email: str = ""
    form_phone: str = ""
    form_status: str = ""
    form_about: str = ""
    errors: dict[str, str] = forms.empty_errors()
    submitting: bool = False
    form_loading: bool = False

    @rx.var(cache=True)
    def name_error(self) -> str:
        return self.errors.get("name", "")

    @rx.var(cache=True)
    def email_error(self) -> str:
        return self.errors.get("email", "")

    @rx.var(cache=True)
    def phone_error(self) -> str:
        return self.errors.get("phone", "")

    @rx.var(cache=True)
    def is_editing(self) -> bool:
        return self.editing_id != ""

    @rx.var(cache=True)
    def submit_disabled(self) -> bool:
        values = {"name": self.form_name, "phone": self.form_phone}
        return self.submitting or not forms.can_submit(self.errors, values)

    def _values(self) -> dict[str, str]:
        return {
            "name": self.form_name,
            "email": self.form_email,
            "phone": self.form_phone,
            "status": self.form_status,
            "about": self.form_about,
        }

    def _set_error(self, field: str, value: str) -> None:
        self.errors = {**self.errors, field: forms.validate_field(field, value)}

    def _reset_form(self) -> None:
        self.editing_id = ""
        self.form_name = ""
        self.form_email = ""
        self.form_phone = ""
        self.form_status = ""
        self.form_about = ""
        self.errors = forms.empty_errors()
        self.submitting = False

    # =====================================================================
    # EXPLICIT SETTERS (validate the touched field only)
    # =====================================================================

    def set_form_name(self, value: str):
        self.form_name = value
        self._set_error("name", value)

    def set_form_email(self, value: str):
        self.form_email = value
        self._set_error("email", value)

    def set_form_phone(self, value: str):
        self.form_phone = value
        self._set_error("phone", value)

    def set_form_status(self, value: str):
        self.form_status = value

    def set_form_about(self, value: str):
        self.form_about = value

    # =====================================================================
    # LIFECYCLE
    # =====================================================================

    def on_add_load(self):
        self._reset_form()
        self.form_loading = False

    async def on_edit_load(self):
        self._reset_form()
        self.editing_id = self.router.page.params.get("record_id", "")
        self.form_loading = True
        yield

        try:
            record = await mutations.load_record(self.schema, self.editing_id)
        except FetchError as e:
            logger.warning(f"Fetching {self.schema.singular} {self.editing_id} failed: {e}")
            self.form_loading = False
            yield rx.toast.error(self.schema.failure_message(Operation.GET))
            yield rx.redirect(self.schema.route)
            return

        values = forms.contact_values(self.schema.singular, record)
        self.form_name = values["name"]
        self.form_email = values["email"]
        self.form_phone = values["phone"]
        self.form_status = values["status"]
        self.form_about = values["about"]
        self.form_loading = False

    # =====================================================================
    # SUBMIT
    # =====================================================================

    async def submit(self):
        if self.submitting:
            return
        values = self._values()
        try:
            forms.check_contact(values)
        except FormValidationError as e:
            self.errors = {**forms.empty_errors(), **e.errors}
            return
        self.errors = forms.empty_errors()

        self.submitting = True
        yield

        payload = forms.contact_payload(self.schema.singular, values)
        operation = Operation.UPDATE if self.editing_id else Operation.ADD
        try:
            if self.editing_id:
                await mutations.update_entity(self.schema, self.editing_id, payload)
            else:
                await mutations.create_entity(self.schema, payload)
        except MutationError as e:
            self.submitting = False
            yield rx.toast.error(e.message)
            return

        self.submitting = False
        yield rx.toast.success(self.schema.success_message(operation))
        yield rx.redirect(self.schema.route)


class BuyerFormState(ContactFormState, rx.State):
    schema: ClassVar[EntitySchema] = BUYERS


class SellerFormState(ContactFormState, rx.State):
    schema: ClassVar[EntitySchema] = SELLERS
