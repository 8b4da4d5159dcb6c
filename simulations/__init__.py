# simulations/__init__.py
"""
Monte Carlo sanity checks for distribution_sampler.

Run comparisons via:
    python -m simulations.compare --dist-a ... --params-a ... --dist-b ... --params-b ... --samples ...
"""
