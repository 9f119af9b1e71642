from .config import TrainerConfig
from .context import END, START, build_context, normalize
from .corpus import TaggedWord, from_pairs, from_words, load_nltk_corpus
from .errors import (
    EmptyClassSetError,
    InvalidConfigurationError,
    MissingTrainingSignalError,
    ModelNotTrainedError,
    TaggerError,
    WeightsFrozenError,
)
from .evaluation import accuracy
from .features import FeatureExtractor
from .perceptron import WeightStore
from .predictor import FromModel, FromTagBook, TrainedModel, tag_sentence
from .tagbook import build_tagbook
from .tagger import PerceptronTagger
from .trainer import Trainer, train
