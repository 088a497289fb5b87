from dataclasses import dataclass

from pod_generator.domain.pod import PodSizeMode
from pod_generator.domain.tier import TierMode, Tolerance


@dataclass(frozen=True)
class GenerationSettings:
    tolerance: Tolerance = Tolerance.EXACT
    mode: PodSizeMode = PodSizeMode.BALANCED
    tier_mode: TierMode = TierMode.NUMERIC

    @property
    def effective_tolerance(self) -> Tolerance:
        """Bracket tiers are discrete, so they only ever match exactly."""
        if self.tier_mode is TierMode.BRACKET:
            return Tolerance.EXACT
        return self.tolerance
