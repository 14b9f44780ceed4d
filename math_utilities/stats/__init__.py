"""
Descriptive statistics over numeric samples.

Includes mean, median, mode and range, plus a one-call summary of the four.
"""
