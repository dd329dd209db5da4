"""Load assessment block.

Previews each participant's workload from their current (draft) selections.

Output DataFrames:
- load_by_participant: One row per active participant
"""

from typing import List
import pandas as pd

from .base import Block, BlockContext
from ..calculations.assignments import build_selection_map
from ..calculations.load import assess_load
from ..schemas import EquitySessionSnapshot, Selection


LOAD_COLUMNS = [
    "participant_id",
    "participant_name",
    "selected_count",
    "load_pct",
    "status",
    "label",
    "in_target",
    "guidance",
]


class LoadAssessmentBlock(Block):
    """Assesses every participant's selection load.

    Inputs (from context):
        - equity_snapshot: EquitySessionSnapshot (participants, responsibilities,
          selection guidance)
        - selections: List[Selection] currently made

    Outputs (to context):
        - load_by_participant: DataFrame with columns:
            * participant_id, participant_name
            * selected_count: number of responsibilities selected
            * load_pct: load with shared selections split between selectors
            * status, label: load tier and its label
            * in_target: load within the guidance target range
            * guidance: selection-count warnings, "; "-separated
    """

    def __init__(
        self,
        snapshot_key: str = "equity_snapshot",
        selections_key: str = "selections",
    ):
        self.snapshot_key = snapshot_key
        self.selections_key = selections_key

    def inputs(self) -> List[str]:
        return [self.snapshot_key, self.selections_key]

    def outputs(self) -> List[str]:
        return ["load_by_participant"]

    def execute(self, context: BlockContext) -> None:
        snapshot: EquitySessionSnapshot = context.get(self.snapshot_key)
        selections: List[Selection] = context.get(self.selections_key)

        participants = snapshot.active_participants()
        if not participants:
            context.set("load_by_participant", pd.DataFrame(columns=LOAD_COLUMNS))
            return

        responsibilities = snapshot.active_responsibilities()
        selection_map = build_selection_map(selections)
        guidance = snapshot.selection_guidance

        rows = []
        for participant in participants:
            selected_ids = [s.responsibility_id for s in selections if s.participant_id == participant.id]
            assessment = assess_load(participant.id, selected_ids, responsibilities, selection_map)
            rows.append({
                "participant_id": participant.id,
                "participant_name": participant.name or participant.id,
                "selected_count": len(selected_ids),
                "load_pct": assessment.load_pct,
                "status": assessment.status,
                "label": assessment.label,
                "in_target": guidance.load_in_target(assessment.load_pct),
                "guidance": "; ".join(guidance.check_selection(len(selected_ids))),
            })

        context.set("load_by_participant", pd.DataFrame(rows, columns=LOAD_COLUMNS))
