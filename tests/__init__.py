"""minimalpack test suite.

Layout
- unit/  : Isolated, fast checks of one helper module at a time, plus
           hypothesis property tests for the invariants callers rely on.

General guidance
- Helpers are pure; assert on returned values and on in-place mutation only.
- Random sampling tests take the seeded `rng` fixture instead of the global
  generator.
- Markers: unit (auto-applied), property (hypothesis tests).
"""
