import logging

import pandas as pd

from structural_demo.patterns.beverage import Beverage
from structural_demo.patterns.payment import CURRENCY


schema = ["description", "cost"]

class Receipt:
    def __init__(self, currency: str = CURRENCY) -> None:
        self.currency = currency
        self._rows: list[list] = []

    def add(self, beverage: Beverage):
        self._rows.append([beverage.get_description(), beverage.get_cost()])

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self._rows, columns=schema)

    def total(self) -> int:
        if not self._rows:
            return 0
        return int(self.to_frame()["cost"].sum())

    def log_summary(self):
        df = self.to_frame()
        if df.empty:
            logging.info("Receipt is empty.")
            return
        lines = ["Receipt:"]
        for description, cost in df.itertuples(index=False):
            lines.append(f"  - {description}: {cost} {self.currency}")
        lines.append(f"  total={self.total()} {self.currency} items={len(df)}")
        logging.info("\n" + "\n".join(lines))
