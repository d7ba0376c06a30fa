from __future__ import annotations

from collections.abc import Sequence

from staff_portal.models.staff import Staff
from staff_portal.schemas.staff import Pagination, StaffOut, StaffViewModel


def build_view_model(records: Sequence[Staff], pagination: Pagination, show_form: bool) -> StaffViewModel:
    return StaffViewModel(
        staff=[StaffOut.model_validate(record) for record in records],
        pagination=pagination,
        showform=show_form,
    )
