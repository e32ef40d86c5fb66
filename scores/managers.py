import structlog

from django.db import models, transaction

from scores.exceptions import EmptyScoresError, InvalidHoleError

logger = structlog.get_logger(__name__)


class ScoreManager(models.Manager):

    def get_queryset(self):
        return super().get_queryset().select_related("player", "hole")

    @transaction.atomic()
    def record_scores(self, rows):
        """
        Save a batch of hole scores, overwriting any earlier entry for the same
        tournament, player and hole.

        Parameters:
            rows (list[dict]): Score descriptors with "tournament", "player" and "hole"
                instances plus "score", "quota" and an optional "foursome_group".

        Returns:
            list[Score]: The saved scores, in the order given.

        Raises:
            EmptyScoresError: If no rows are provided.
            InvalidHoleError: If a hole is not on the tournament's course or is beyond
                the number of holes being played. Nothing in the batch is saved.
        """
        if not rows:
            raise EmptyScoresError()

        saved = []
        for row in rows:
            tournament = row["tournament"]
            hole = row["hole"]
            if hole.course_id != tournament.course_id or hole.hole_number > tournament.number_of_holes:
                raise InvalidHoleError(hole.id)

            score, created = self.update_or_create(
                tournament=tournament,
                player=row["player"],
                hole=hole,
                defaults={
                    "score": row["score"],
                    "quota": row["quota"],
                    "foursome_group": row.get("foursome_group"),
                },
            )
            saved.append(score)

        logger.info("Scores saved", tournament_id=rows[0]["tournament"].id, count=len(saved))
        return saved

    def for_tournament(self, tournament_id):
        return self.filter(tournament_id=tournament_id).order_by("hole__hole_number", "player__name")

    def for_foursome(self, tournament_id, group):
        return self.for_tournament(tournament_id).filter(foursome_group=group)
