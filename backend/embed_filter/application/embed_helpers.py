"""Helper operations for the embed-question filter."""
from __future__ import annotations
from typing import Dict, List, Optional, Union

from loguru import logger

from embed_filter.domain.embed.behaviours import BehaviourRegistry
from embed_filter.domain.embed.errors import NotYourAttemptError
from embed_filter.domain.embed.filters import is_enabled_globally, resolve_active_filters
from embed_filter.domain.embed.models import Actor, Context, Question, QuestionUsage
from embed_filter.lang.strings import StringManager
from embed_filter.output.renderer import (
    EmbedRenderer,
    ErrorMessage,
    OutputBuffer,
    TerminateResponse,
    format_string,
)
from embed_filter.persistence.interfaces.filter_settings_repository import FilterSettingsRepository
from embed_filter.persistence.interfaces.question_bank_repository import QuestionBankRepository

Choices = Dict[Union[int, str], str]


class EmbedHelpers:
    """
    Stateless helpers used by the embed pages. Every collaborator is passed in,
    so nothing here reads ambient request state.
    """

    def __init__(
        self,
        questions: QuestionBankRepository,
        filter_settings: FilterSettingsRepository,
        strings: StringManager,
        renderer: EmbedRenderer,
        behaviours: BehaviourRegistry,
        filter_name: str = "embedquestion",
        component: str = "filter_embedquestion",
        site_id: int = 1,
    ):
        self._questions = questions
        self._filter_settings = filter_settings
        self._strings = strings
        self._renderer = renderer
        self._behaviours = behaviours
        self._filter_name = filter_name
        self._component = component
        self._site_id = site_id

    # ------------------------------------------------------------------
    # Filter state
    # ------------------------------------------------------------------
    def warn_if_filter_disabled(self, context: Context, output: OutputBuffer) -> None:
        """Write a warning notification to output if the filter is not enabled in this context."""
        system_states = self._filter_settings.get_system_states()
        if not is_enabled_globally(system_states.get(self._filter_name)):
            output.write(self._renderer.notification(
                self._strings.get_string("warningfilteroffglobally", self._component)))
            return

        path_ids = context.get_parent_context_ids() + [context.id]
        active = resolve_active_filters(
            system_states, self._filter_settings.get_local_states(path_ids), path_ids)
        if self._filter_name not in active:
            output.write(self._renderer.notification(
                self._strings.get_string("warningfilteroffhere", self._component)))

    def filter_error(self, string_key: str) -> TerminateResponse:
        """
        Build the error page shown inside the filter iframe. The caller must
        send the returned response and do nothing else.

        string_key is accepted for the call signature; the page always shows
        the invalid token message.
        """
        logger.info(f"Embed filter error requested ({string_key}), terminating response")
        body = (
            self._renderer.header()
            + self._renderer.render(ErrorMessage("invalidtoken"))
            + self._renderer.footer()
        )
        return TerminateResponse(body=body)

    # ------------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------------
    def verify_usage(self, usage: QuestionUsage, actor: Actor) -> None:
        """Raise NotYourAttemptError unless the usage belongs to actor and to this filter."""
        message = self._strings.get_string("notyourattempt", self._component)
        if usage.get_owning_context().instanceid != actor.id:
            logger.warning(f"Usage {usage.id} is not owned by user {actor.id}")
            raise NotYourAttemptError("notyourattempt", message)
        if usage.get_owning_component() != self._component:
            logger.warning(f"Usage {usage.id} belongs to component '{usage.get_owning_component()}'")
            raise NotYourAttemptError("notyourattempt", message)

    def get_relevant_courseid(self, context: Context) -> int:
        """
        Given any context, find the course whose question bank to embed from.

        Anywhere inside a course, that is the id of that course. Outside of a
        particular course, it is the front page course id.
        """
        coursecontext = context.get_course_context(strict=False)
        if coursecontext:
            return coursecontext.instanceid
        return self._site_id

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def get_category_by_idnumber(self, context: Context, categoryid) -> List[int]:
        # Matches on the category id, not idnumber, and ignores context. Kept as is.
        return self._questions.find_category_ids(categoryid)

    def get_question_by_idnumber(self, categoryid, questionid) -> Optional[Question]:
        """Only visible top-level questions are returned; None if there is no match."""
        return self._questions.get_sharable_question(categoryid, questionid)

    def get_categories_with_sharable_question_choices(self, context: Context, userid: Optional[int] = None) -> Choices:
        """
        Select-menu choices of question categories, labelled "Name (count)".

        context and userid do not narrow the list at present: every category
        holding questions is returned with its total question count.
        """
        choices: Choices = {"": self._strings.get_string("choosedots")}
        for category, count in self._questions.list_categories_with_question_counts():
            choices[category.id] = self._strings.get_string(
                "nameandcount", self._component,
                {"name": format_string(category.name), "count": count},
            )
        return choices

    def get_sharable_question_choices(self, categoryid, userid: Optional[int] = None) -> Choices:
        """Select-menu choices of every question in a category, by name. userid is not applied."""
        choices: Choices = {"": self._strings.get_string("choosedots")}
        for question in self._questions.list_questions_in_category(categoryid):
            choices[question.id] = format_string(question.name)
        return choices

    def behaviour_choices(self) -> Dict[str, str]:
        """Behaviours that can be used with this filter: name => display name."""
        behaviours = {}
        for behaviour, name in self._behaviours.get_archetypal_behaviours().items():
            unusedoptions = self._behaviours.get_behaviour_unused_display_options(behaviour)
            # Suitable only if specific feedback is shown during the attempt.
            if "specificfeedback" not in unusedoptions:
                behaviours[behaviour] = name
        return behaviours
