# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Required-field validity."""

from __future__ import annotations

from ..collaborators.base import FormAssociation
from ..config import DEFAULT_REQUIRED_MESSAGE
from ..models import Validity


class ValidityGate:
    """Derives required-field satisfaction from the tag count and pushes it to the form."""

    def __init__(self, form: FormAssociation | None = None, *, message: str = DEFAULT_REQUIRED_MESSAGE):
        self.form = form
        self.message = message
        self.current = Validity(valid=True)

    def evaluate(self, required: bool, store_length: int) -> Validity:
        if required and store_length == 0:
            return Validity(valid=False, message=self.message)
        return Validity(valid=True)

    def update(self, required: bool, store_length: int) -> Validity:
        self.current = self.evaluate(required, store_length)
        if self.form is not None:
            self.form.set_validity(self.current)
        return self.current

    def check(self, required: bool, store_length: int) -> bool:
        return self.update(required, store_length).valid

    def report(self, required: bool, store_length: int) -> Validity:
        validity = self.update(required, store_length)
        if not validity.valid and self.form is not None:
            self.form.report_validity(validity)
        return validity
