"""aus-update goal: write browser update.xml files for aus_release targets."""

from pants.engine.console import Console
from pants.engine.goal import Goal, GoalSubsystem
from pants.engine.rules import Get, MultiGet, collect_rules, goal_rule
from pants.engine.target import FilteredTargets
from pants.option.option_types import StrOption

from pants_aus_update._exceptions import ManifestWriteError
from pants_aus_update._generate import generate_browser_update_files
from pants_aus_update.rules.update import (
    AusReleaseFieldSet,
    AusUpdatePlan,
    AusUpdateRequest,
)
from pants_aus_update.targets import ChannelField


class AusUpdateGoalSubsystem(GoalSubsystem):
    name = "aus-update"
    help = "Generate browser AUS update.xml files for aus_release targets."

    mar_path = StrOption(
        default="",
        help="Path to the signed mar archive produced by the package step.",
    )


class AusUpdateGoal(Goal):
    subsystem_cls = AusUpdateGoalSubsystem
    environment_behavior = Goal.EnvironmentBehavior.LOCAL_ONLY


@goal_rule
async def run_aus_update(
    console: Console,
    targets: FilteredTargets,
    subsystem: AusUpdateGoalSubsystem,
) -> AusUpdateGoal:
    release_targets = [t for t in targets if t.has_field(ChannelField)]

    if not release_targets:
        console.print_stderr("No aus_release targets found.")
        return AusUpdateGoal(exit_code=0)

    plans = await MultiGet(
        Get(
            AusUpdatePlan,
            AusUpdateRequest(AusReleaseFieldSet.create(t)),
        )
        for t in release_targets
    )

    exit_code = 0
    for plan in plans:
        report = generate_browser_update_files(
            plan.settings, plan.release, subsystem.mar_path
        )

        for path in report.written:
            console.print_stdout(f"Generated update file: {path}")

        try:
            report.raise_for_failures()
        except ManifestWriteError as e:
            for failure in e.failures:
                console.print_stderr(
                    f"Failed to write {failure.path} ({failure.aus_platform}): "
                    f"{failure.error}"
                )
            exit_code = 1

    return AusUpdateGoal(exit_code=exit_code)


def rules():
    return collect_rules()
