import logging
import time

import numpy as np
import pandas as pd

from liftminer.Associations import AssociationRec, Associations
from liftminer.Corpus import Corpus
from liftminer.Errors import InsufficientData, InvalidInput
from liftminer.ItemQClass import most_frequent
from liftminer.ItemsetRec import ItemsetRec

logger = logging.getLogger(__name__)

DEFAULT_K = 100


class LiftMiner:
    """Scores the association between a fixed set of target items and each of the k most
    frequently purchased other items of a transaction corpus, to find cross-sell candidates.

    Every candidate c is scored as the association [c] -> targets. A candidate for which
    the association is undefined (the targets never occur in the corpus) is kept in the
    result as an undefined record rather than stopping the run.

    This program is free software: you can redistribute it and/or modify it under the terms of the
    GNU General Public License as published by the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the
    implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
    for more details.

    You should have received a copy of the GNU General Public License along with this program.
    If not, see <http://www.gnu.org/licenses/>.
    """

    """
    :param
    @targets - the item ids that every candidate is associated with
    @input_data - the transactions: a dict of transaction id -> list of item ids (as read
        by TransactionFile), a list of transactions, or a market-basket data frame with one
        transaction per row and blank cells as '' or NaN
    @k - the number of most frequent items to consider as candidates.  By default it is 100
    """
    def __init__(self,
                 targets,
                 input_data,
                 k=DEFAULT_K
                 ):
        self.targets = ItemsetRec.of(targets)
        self.input_data = input_data
        self.k = k

    def fit(self):
        start_t = time.perf_counter()

        # load data
        transactions = load_data(self.input_data)
        if not transactions:
            raise InvalidInput("no transactions to mine")

        corpus = Corpus(transactions)

        # pull all item ids (non-unique) from the transactions
        candidates = [item for item in most_frequent(flatten(transactions), self.k)
                      if item not in self.targets]

        records = []
        for item in candidates:
            record = score([item], self.targets, corpus)
            if not record.defined:
                logger.warning("no lift for candidate %s: count_a=%d, count_b=%d",
                               item, record.count_a, record.count_b)
            records.append(record)

        logger.debug("scored %d candidates against %s over %d transactions in %.3fs",
                     len(records), list(self.targets), len(corpus), time.perf_counter() - start_t)

        return Associations(self.targets, records)


# Given two item sets, a and b, and a corpus of transactions, count how often a, b and
# the combination of a and b occur and derive support, confidence and lift from the counts.
def score(a, b, corpus):
    a = ItemsetRec.of(a)
    b = ItemsetRec.of(b)
    corpus = Corpus.of(corpus)

    if len(corpus) == 0:
        raise InvalidInput("the corpus contains no transactions")

    tids_a = corpus.get_tids(a)
    tids_b = corpus.get_tids(b)

    return AssociationRec(a.with_count(len(tids_a)), b.with_count(len(tids_b)),
                          len(tids_a & tids_b), corpus)


def lift(a, b, corpus):
    record = score(a, b, corpus)
    if not record.defined:
        raise InsufficientData(record)
    return record.lift


def flatten(transactions):
    return [item for transaction in transactions for item in transaction]


def load_data(input_data):
    if isinstance(input_data, pd.DataFrame):
        # each row is one transaction, blank cells pad the shorter ones
        transactions = []
        for row in input_data.itertuples(index=False):
            transactions.append([to_item(value) for value in row if not is_blank(value)])
        return transactions

    if isinstance(input_data, dict):
        return [list(transaction) for transaction in input_data.values()]

    return [list(transaction) for transaction in input_data]


def is_blank(value):
    if isinstance(value, str):
        return value.strip() == ''
    return pd.isna(value)


def to_item(value):
    if isinstance(value, str):
        value = value.strip()
        try:
            return int(value)
        except ValueError:
            raise InvalidInput("item id %r is not an integer" % value)
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, (float, np.floating)):
        # numeric columns holding blanks are read as floats
        if not float(value).is_integer():
            raise InvalidInput("item id %r is not an integer" % value)
        return int(value)
    return value
