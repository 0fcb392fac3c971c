"""
Service layer abstraction.

Services encapsulate business logic.  The airport directory keeps its
records in memory; route handlers only talk to it through the
``AirportDirectory`` methods.
"""
