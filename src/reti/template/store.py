# SPDX-License-Identifier: MIT

from reti.model.store import Store


def get_store_template(fee_per_hour: float = 0.0) -> Store:
    return {
        "fee_per_hour": fee_per_hour,
        "years": [],
    }
