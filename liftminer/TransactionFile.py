import json
import logging
import numbers

from liftminer.Errors import InvalidInput

logger = logging.getLogger(__name__)


class TransactionFile:
    """Reads and writes a transaction table as a local JSON file.

    The table is the slimmest representation of order history needed for mining: a JSON
    object keyed by transaction id whose values are arrays of integer item ids.
    """

    def __init__(self, filepath):
        self.filepath = filepath

    def load(self):
        try:
            with open(self.filepath, 'r', encoding='utf-8') as f:
                text = f.read()
        except FileNotFoundError:
            logger.info("no transaction table at %s, starting empty", self.filepath)
            return {}

        try:
            table = json.loads(text)
        except ValueError as e:
            raise InvalidInput("%s is not valid JSON: %s" % (self.filepath, e))

        check_table(table)
        logger.info("loaded %d transactions from %s", len(table), self.filepath)
        return table

    def save(self, table):
        check_table(table)
        with open(self.filepath, 'w', encoding='utf-8') as f:
            json.dump(table, f, indent=2)
        logger.info("saved %d transactions to %s", len(table), self.filepath)


def check_table(table):
    if not isinstance(table, dict):
        raise InvalidInput("a transaction table must be an object keyed by transaction id")

    for transaction_id, items in table.items():
        if not isinstance(transaction_id, str):
            raise InvalidInput("transaction id %r is not a string" % (transaction_id,))
        if not isinstance(items, list):
            raise InvalidInput("transaction %s is not an array of item ids" % transaction_id)
        for item in items:
            # bool is an Integral too, but never an item id
            if isinstance(item, bool) or not isinstance(item, numbers.Integral):
                raise InvalidInput("transaction %s holds a non-integer item %r" % (transaction_id, item))
