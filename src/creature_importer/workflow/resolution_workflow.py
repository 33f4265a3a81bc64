"""
Sequential resolution workflow.

Walks the unresolved abilities of one creature, one at a time. For each
item the resolver pre-selects a best guess, then exactly one operator
decision (assign, skip or abort) moves the workflow on. The presentation
layer only observes Presentation objects and feeds decisions back; it
never owns the control flow.

    Idle -> Presenting(item) -> Assigned | Skipped -> Presenting(next) ... -> Completed
    Presenting(item) -> Aborted
"""
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional

from ..catalog.index import GENERAL_SKILL
from ..config import ImporterConfig
from ..exceptions import WorkflowStateError
from ..models import AbilityKind, CreatureRecord, ReferenceLibraryEntry, ResolvedAbility, UnresolvedAbilityRef
from ..resolution import EntityResolver, Resolution, normalize_skill_hint
from .session_state import (
    Abort,
    Assign,
    Decision,
    ItemOutcome,
    ResolutionSession,
    Skip,
    WorkflowReport,
    WorkflowState,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkillOption:
    group: str
    key: str
    label: str
    value: int = 0


@dataclass
class Presentation:
    """Everything the presentation layer needs to show one item."""
    ref: UnresolvedAbilityRef
    position: int
    total: int
    skill_filter: Optional[str]
    resolution: Resolution
    preselected: Optional[ReferenceLibraryEntry] = None
    options: List[ReferenceLibraryEntry] = field(default_factory=list)
    skill_options: List[SkillOption] = field(default_factory=list)


Driver = Callable[["Presentation"], Awaitable[Decision]]


class SequentialResolutionWorkflow:
    """
    Controller for one resolution session.
    
    Usage:
        workflow = SequentialResolutionWorkflow(record, resolver)
        presentation = await workflow.present_next()
        while presentation:
            await workflow.decide(Assign(presentation.preselected.unique_id))
            presentation = await workflow.present_next()
        report = workflow.report()
    """
    
    def __init__(
        self,
        record: CreatureRecord,
        resolver: EntityResolver,
        queue: Optional[List[UnresolvedAbilityRef]] = None,
        config: Optional[ImporterConfig] = None,
        is_present: Optional[Callable[[UnresolvedAbilityRef], bool]] = None,
    ):
        """
        :param record: Creature whose abilities are being resolved
        :param resolver: Entity resolver used for pre-selection
        :param queue: Items to walk, defaults to the record's untagged unresolved abilities
        :param config: Importer configuration (skill groups and labels)
        :param is_present: Whether an item still belongs to the creature
        """
        if queue is None:
            queue = [ref for ref in record.unresolved_abilities if not ref.manually_tagged]
        
        self._record = record
        self._resolver = resolver
        self._config = config or ImporterConfig()
        self._is_present = is_present or (lambda ref: record.find_unresolved(ref.ref_id) is not None)
        self._session = ResolutionSession(queue=list(queue))
        self._presentation: Optional[Presentation] = None
    
    @property
    def session(self) -> ResolutionSession:
        return self._session
    
    @property
    def state(self) -> WorkflowState:
        return self._session.state
    
    @property
    def current(self) -> Optional[Presentation]:
        return self._presentation
    
    async def present_next(self) -> Optional[Presentation]:
        """
        Present the next item still owned by the creature.
        
        Items removed by someone else are passed over without being shown.
        
        :return: Presentation, or None once the session is terminal
        :raises: WorkflowStateError if an item is already being presented
        """
        if self._session.state == WorkflowState.PRESENTING:
            raise WorkflowStateError("An item is already being presented; decide on it first")
        if self._session.is_terminal():
            return None
        
        while self._session.current() is not None:
            ref = self._session.current()
            if not self._is_present(ref):
                logger.info(f"'{ref.name}' was removed before it was presented, skipping")
                self._session.record(ref, ItemOutcome.REMOVED)
                self._session.advance()
                continue
            
            self._session.state = WorkflowState.PRESENTING
            try:
                self._presentation = await self._prepare(ref)
            except Exception:
                self._session.state = WorkflowState.IDLE
                raise
            logger.info(
                f"Presenting {ref.kind.value} '{ref.name}' "
                f"({self._session.cursor + 1}/{len(self._session.queue)})"
            )
            return self._presentation
        
        self._session.state = WorkflowState.COMPLETED
        logger.info(f"Resolution of '{self._record.name}' complete")
        return None
    
    async def requery(self, skill: Optional[str]) -> Presentation:
        """
        Re-run resolution for the current item under an operator-chosen skill.
        
        :param skill: Skill key, GENERAL_SKILL for skill-less masteries, or None for any skill
        :raises: WorkflowStateError if nothing is being presented
        """
        self._require_presenting()
        ref = self._presentation.ref
        self._presentation = await self._prepare(ref, skill_override=skill, overridden=True)
        return self._presentation
    
    async def decide(self, decision: Decision) -> None:
        """
        Apply the operator decision for the current item.
        
        :raises: WorkflowStateError if nothing is being presented
        :raises: EntryNotFoundError if an assigned entry cannot be fetched;
                 the item stays presented
        """
        self._require_presenting()
        ref = self._presentation.ref
        
        if isinstance(decision, Assign):
            entry = await self._resolver.index.fetch_entry(decision.entry_id)
            ability = ResolvedAbility(entry=entry, skill_hint=self._bound_skill(ref))
            if not self._record.bind_ability(ref, ability):
                logger.info(f"'{entry.name}' already on '{self._record.name}', dropping placeholder")
            self._session.record(ref, ItemOutcome.ASSIGNED, entry)
            logger.info(f"Assigned '{entry.name}' to '{ref.name}'")
            self._finish_item()
        elif isinstance(decision, Skip):
            self._record.tag_unresolved(ref)
            self._session.record(ref, ItemOutcome.SKIPPED)
            logger.info(f"Skipped '{ref.name}', left unresolved")
            self._finish_item()
        elif isinstance(decision, Abort):
            self._abort()
        else:
            raise WorkflowStateError(f"Unknown decision: {decision!r}")
    
    def close(self) -> bool:
        """
        Close the workflow from the presentation side.
        
        Aborts once; closing a terminal workflow does nothing.
        
        :return: True if this call aborted the workflow
        """
        if self._session.is_terminal():
            return False
        self._abort()
        return True
    
    async def run(self, driver: Driver) -> WorkflowReport:
        """
        Drive the whole session with a decision callback.
        
        :param driver: Async callable returning a Decision for a Presentation
        """
        presentation = await self.present_next()
        while presentation is not None:
            await self.decide(await driver(presentation))
            presentation = await self.present_next()
        return self.report()
    
    def report(self) -> WorkflowReport:
        return WorkflowReport.from_session(self._session)
    
    def skill_options(self, ref: UnresolvedAbilityRef) -> List[SkillOption]:
        """
        Skills the operator may pick as filter.
        
        Masteries: a "no skill" option plus every configured skill, grouped.
        Spells: only magic schools in which the creature has a value.
        """
        groups = self._config.skill_groups
        
        if ref.kind == AbilityKind.SPELL:
            return [
                SkillOption("magic", skill, self._config.skill_label(skill), self._record.skill_value(skill))
                for skill in groups.magic
                if self._record.skill_value(skill) > 0
            ]
        
        options = [SkillOption("none", GENERAL_SKILL, "General masteries")]
        for group, skills in (("general", groups.general), ("fighting", groups.fighting), ("magic", groups.magic)):
            group_options = [
                SkillOption(group, skill, self._config.skill_label(skill), self._record.skill_value(skill))
                for skill in skills
            ]
            options.extend(sorted(group_options, key=lambda o: o.label.lower()))
        return options
    
    async def _prepare(
        self,
        ref: UnresolvedAbilityRef,
        skill_override: Optional[str] = None,
        overridden: bool = False,
    ) -> Presentation:
        skill = skill_override if overridden else normalize_skill_hint(ref.skill_hint)
        preselected = None
        
        if not overridden and skill is None and ref.kind == AbilityKind.SPELL:
            best = await self._resolver.suggest_skill(ref.name, ref.kind, ref.level_ceiling)
            if best is not None:
                skill = best.entry.skill
                preselected = best.entry
        
        resolution = await self._resolver.resolve(ref.name, ref.kind, skill, ref.level_ceiling)
        if preselected is None:
            preselected = resolution.best_guess
        
        options = await self._resolver.index.browse(ref.kind, skill, ref.level_ceiling)
        
        return Presentation(
            ref=ref,
            position=self._session.cursor + 1,
            total=len(self._session.queue),
            skill_filter=skill,
            resolution=resolution,
            preselected=preselected,
            options=options,
            skill_options=self.skill_options(ref),
        )
    
    def _bound_skill(self, ref: UnresolvedAbilityRef) -> Optional[str]:
        skill = self._presentation.skill_filter
        if skill and skill != GENERAL_SKILL:
            return skill
        return normalize_skill_hint(ref.skill_hint)
    
    def _finish_item(self) -> None:
        self._session.advance()
        self._presentation = None
        self._session.state = WorkflowState.IDLE
    
    def _abort(self) -> None:
        for ref in self._session.remaining():
            self._session.record(ref, ItemOutcome.DISCARDED)
        self._session.cursor = len(self._session.queue)
        self._session.state = WorkflowState.ABORTED
        self._presentation = None
        logger.info(
            f"Resolution of '{self._record.name}' aborted, "
            f"{len(self._session.refs_with(ItemOutcome.DISCARDED))} item(s) left unresolved"
        )
    
    def _require_presenting(self) -> None:
        if self._session.state != WorkflowState.PRESENTING or self._presentation is None:
            raise WorkflowStateError(f"No item is being presented (state: {self._session.state.value})")
