"""Hypothesis strategies for property-based testing of optres types."""

from hypothesis import strategies as st

from optres import Err, Nothing, Ok, Some

# Basic value strategies
integers = st.integers()
texts = st.text(min_size=0, max_size=100)
booleans = st.booleans()

# Exception strategies
exceptions = st.sampled_from([
    ValueError('test'),
    TypeError('test'),
    RuntimeError('test'),
])

# Option strategies
somes = integers.map(Some)
options = st.one_of(somes, st.just(Nothing))

# Result strategies
oks = integers.map(Ok)
errs = exceptions.map(Err)
results = st.one_of(oks, errs)

# Nested values for transpose round trips
options_of_results = st.one_of(st.just(Nothing), results.map(Some))
results_of_options = st.one_of(options.map(Ok), errs)
