"""
Models Module
=============

This module contains the rating systems implemented on top of glickit.core.

Included Rating Systems:
- Glicko 2: Mark Glickman's extension of Glicko which tracks a volatility per competitor alongside
  the rating and rating deviation, and updates all three once per rating period.

Each rating system is implemented as a subclass of glickit.core.base.RatingPeriodSystem and only has to
describe how one competitor's new state follows from the games of a round.

"""
