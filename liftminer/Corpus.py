import logging
from collections import defaultdict

from liftminer.Errors import InvalidInput
from liftminer.ItemsetRec import ItemsetRec

logger = logging.getLogger(__name__)


class Corpus:
    """Read-only view of a transaction corpus.

    Each transaction is kept as a frozenset of its item ids (presence only), and the
    list of transactions that contain each item is computed once, so that the cover of
    any item set is an intersection of precomputed covers. A Corpus can be shared by
    any number of scoring calls; nothing in it changes after construction.
    """

    def __init__(self, transactions):
        self._transactions = tuple(frozenset(transaction) for transaction in transactions)

        # save the transaction indices according to item id
        transaction_ids = defaultdict(set)
        for tid, transaction in enumerate(self._transactions):
            for item in transaction:
                transaction_ids[item].add(tid)
        self._transaction_ids = {item: frozenset(tids) for item, tids in transaction_ids.items()}

        logger.debug("corpus built: %d transactions, %d distinct items",
                     len(self._transactions), len(self._transaction_ids))

    @classmethod
    def of(cls, corpus):
        if isinstance(corpus, Corpus):
            return corpus
        return cls(corpus)

    def __len__(self):
        return len(self._transactions)

    def __iter__(self):
        return iter(self._transactions)

    @property
    def items(self):
        return frozenset(self._transaction_ids)

    def item_count(self, item):
        return len(self._transaction_ids.get(item, ()))

    # the indices of the transactions that contain every item of itemset
    def get_tids(self, itemset):
        itemset = ItemsetRec.of(itemset)

        # start from the rarest item so the running intersection stays small
        ordered = sorted(itemset, key=self.item_count)
        transactions = self._transaction_ids.get(ordered[0], frozenset())
        for item in ordered[1:]:
            if not transactions:
                break
            transactions = transactions & self._transaction_ids.get(item, frozenset())

        return transactions

    def count(self, itemset):
        return len(self.get_tids(itemset))

    def count_to_support(self, count):
        if not self._transactions:
            raise InvalidInput("the corpus contains no transactions")
        return count / len(self._transactions)
