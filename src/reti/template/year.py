# SPDX-License-Identifier: MIT

from reti.model.year import Year


def get_year_template(year: int) -> Year:
    return {
        "year": year,
        "days": [],
    }
