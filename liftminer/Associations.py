import pandas as pd


FRAME_COLUMNS = ['item', 'count_a', 'count_b', 'count_ab', 'support_a', 'support_b', 'support_ab',
                 'confidence', 'lift', 'defined']


class AssociationRec:
    """The strength of the association between item sets a and b in one corpus.

    confidence and lift are None when a or b never occurs in the corpus, and defined is
    False; in every other case both are floats (lift is 0.0 when a and b never occur
    together).
    """

    # a and b are ItemsetRec objects carrying their transaction counts in corpus
    def __init__(self, a, b, count_ab, corpus):
        self.a = a
        self.b = b
        self.n = len(corpus)
        self.count_a = a.count
        self.count_b = b.count
        self.count_ab = count_ab

        # https://en.wikipedia.org/wiki/Association_rule_learning#Support
        self.support_a = corpus.count_to_support(self.count_a)
        self.support_b = corpus.count_to_support(self.count_b)
        self.support_ab = corpus.count_to_support(count_ab)

        self.defined = self.count_a > 0 and self.count_b > 0
        if self.defined:
            # https://en.wikipedia.org/wiki/Association_rule_learning#Confidence
            self.confidence = count_ab / self.count_a
            # https://en.wikipedia.org/wiki/Association_rule_learning#Lift
            self.lift = self.support_ab / (self.support_a * self.support_b)
        else:
            self.confidence = None
            self.lift = None

    def __eq__(self, other):
        if not isinstance(other, AssociationRec):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def as_tuple(self):
        return (tuple(self.a), tuple(self.b), self.n, self.count_a, self.count_b, self.count_ab)

    def __repr__(self):
        if self.defined:
            return "AssociationRec(%s -> %s, confidence=%.6g, lift=%.6g)" % (
                list(self.a), list(self.b), self.confidence, self.lift)
        return "AssociationRec(%s -> %s, undefined)" % (list(self.a), list(self.b))


class Associations:
    """Candidates scored against the target item set, kept in candidate rank order."""

    def __init__(self, targets, records=()):
        self.targets = list(targets)
        self.records = list(records)

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def __getitem__(self, index):
        return self.records[index]

    @property
    def defined(self):
        return [record for record in self.records if record.defined]

    @property
    def undefined(self):
        return [record for record in self.records if not record.defined]

    def lifts(self):
        # candidate item id -> lift, None for candidates without enough data
        return {candidate_item(record): record.lift for record in self.records}

    # sort with descending order of lift, undefined candidates last
    def sorted_by_lift(self):
        ranked = sorted(self.defined, key=lambda record: record.lift, reverse=True)
        return ranked + self.undefined

    def to_frame(self):
        rows = []
        for record in self.records:
            rows.append({
                'item': candidate_item(record),
                'count_a': record.count_a,
                'count_b': record.count_b,
                'count_ab': record.count_ab,
                'support_a': record.support_a,
                'support_b': record.support_b,
                'support_ab': record.support_ab,
                'confidence': record.confidence,
                'lift': record.lift,
                'defined': record.defined,
            })
        frame = pd.DataFrame(rows, columns=FRAME_COLUMNS)
        # undefined confidence and lift become NaN, see the defined column
        frame[['confidence', 'lift']] = frame[['confidence', 'lift']].astype(float)
        return frame


# candidates are scored as single-item sets on the a side
def candidate_item(record):
    return record.a[0] if len(record.a) == 1 else tuple(record.a)
