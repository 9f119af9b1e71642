from .config import TrainerConfig
from .errors import ModelNotTrainedError
from .predictor import tag_sentence
from .trainer import Trainer


class PerceptronTagger:

    def __init__(self, config=None, **params):
        # keyword params override the defaults of TrainerConfig
        self.config = config if config is not None else TrainerConfig(**params)
        self.model = None

    def train(self, train_data):

        self.model = Trainer(self.config).train(train_data)
        return self

    def _trained(self):
        if self.model is None:
            raise ModelNotTrainedError("train the tagger before predicting")
        return self.model

    def predict(self, sentence):

        return self._trained().predict(sentence)

    def tag(self, tokens):
        # (word, begin, end) tokens -> TaggedWords
        return tag_sentence(self._trained(), tokens)
