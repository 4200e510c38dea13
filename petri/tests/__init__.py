"""
Tests for petri.

This package contains tests for:
- The pseudo-random generator and its distributions
- The Eye sensor model
- Network propagation and flat weight handling
- Neuroevolution operators and the genetic algorithm
- The headless simulation and command line runner
"""
