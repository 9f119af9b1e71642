class TaggerError(Exception):
    pass


class InvalidConfigurationError(TaggerError, ValueError):
    pass


class MissingTrainingSignalError(TaggerError):
    # raised when the corpus has no sentences or a token carries no tag
    pass


class EmptyClassSetError(TaggerError):
    pass


class ModelNotTrainedError(TaggerError):
    pass


class WeightsFrozenError(TaggerError):
    # the weight store was already averaged, it can not be updated again
    pass
