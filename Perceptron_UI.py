import logging

import pandas as pd
import streamlit as st

from pos_perceptron import PerceptronTagger, accuracy, from_words, load_nltk_corpus
from pos_perceptron.predictor import FromTagBook

logging.basicConfig(level=logging.INFO)


@st.cache_resource
def load_tagger(corpus, n_iterations):
    dataset = load_nltk_corpus(corpus, tagset='universal')
    split = int(len(dataset) * 0.9)
    tagger = PerceptronTagger(n_iterations=n_iterations).train(dataset[:split])
    return tagger, accuracy(tagger.model, dataset[split:])


st.set_page_config(
    page_title="POS Tagging with Averaged Perceptron",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.title('POS Tagger')
st.markdown('Interface to predict part of speech tag for each word of a given sentence using an Averaged Perceptron')

with st.sidebar:
    corpus = st.selectbox('Training corpus', ['treebank', 'brown'])
    n_iterations = st.slider('Iterations', min_value=1, max_value=10, value=5)

tagger, dev_accuracy = load_tagger(corpus, n_iterations)

info, input = st.columns(2)

with info:
    st.header("Model")
    st.metric("Held out accuracy", f"{dev_accuracy * 100:.2f}%")
    st.markdown(f"{len(tagger.model.tagbook)} words resolved by the tag book, {len(tagger.model.classes)} tags")

with input:

    st.header("Predict Tags")
    sentence = st.text_input('Enter Input Sentence')

    if st.button("Predict POS Tags"):
        tokens = from_words(sentence.split())
        decisions = tagger.model.decisions([token.word for token in tokens])
        st.subheader("Result :")
        st.dataframe(pd.DataFrame({
            'word': [token.word for token in tokens],
            'begin': [token.begin for token in tokens],
            'end': [token.end for token in tokens],
            'tag': [decision.tag for decision in decisions],
            'source': ['tag book' if isinstance(decision, FromTagBook) else 'model' for decision in decisions],
        }))
