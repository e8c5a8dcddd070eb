"""
Weight normalization and scoring engine: pure functions, no I/O.

Modules
-------
normalizer : normalize() merges global/local weight maps into a FeatureSet
             using one shared max-absolute scaling constant.
selector   : top_positive() + top_negative() + select_top_features()
             + sign_flip_corrections() + EmptyInputError.
predictor  : predict() scores an input record (weighted sum) against
             a FeatureSet's global weights.
"""
