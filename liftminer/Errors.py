class LiftMinerError(Exception):
    pass


# empty item set, empty target set, empty corpus or a malformed transaction table
class InvalidInput(LiftMinerError, ValueError):
    pass


class InsufficientData(LiftMinerError):
    """Raised when one side of an association never occurs in the corpus, so confidence
    and lift have a zero denominator. The undefined AssociationRec is kept on the error
    so that callers can report the counts anyway."""

    def __init__(self, record, message=None):
        if message is None:
            message = "insufficient co-occurrence data for %s -> %s (count_a=%d, count_b=%d)" % (
                list(record.a), list(record.b), record.count_a, record.count_b)
        super().__init__(message)
        self.record = record
