"""HAL implementations.

Backends are imported lazily by ``HALFactory`` so that a missing optional
library only fails when that backend is selected.
"""
