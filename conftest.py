from __future__ import annotations

import os

import hypothesis as h

# selection inputs are tiny, so the profiles differ only in how many examples
# they draw and how much they print
_common = dict(suppress_health_check=[h.HealthCheck.too_slow], deadline=None)

h.settings.register_profile("ci", max_examples=500, derandomize=True, **_common)
h.settings.register_profile("dev", max_examples=50, **_common)
h.settings.register_profile(
    "debug", max_examples=10, verbosity=h.Verbosity.verbose, **_common
)

# pick a profile with the HYPOTHESIS_PROFILE environment variable or the
# --hypothesis-profile option, e.g.
# pytest dimselect -sv --hypothesis-profile=debug
h.settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))
