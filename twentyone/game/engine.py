"""Twenty-One round engine with state machine."""

import logging
from dataclasses import dataclass
from random import Random
from typing import Callable, Sequence

from transitions import Machine, MachineError

from twentyone.cards import Card, Deck
from twentyone.game.events import EventEmitter, EventType, GameEvent
from twentyone.game.state import GameState, machine_transitions
from twentyone.hand import Outcome, STARTING_HAND, classify
from twentyone.participant import AskMove, DEALER_NAMES, DEALER_THRESHOLD, Move, Participant

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """
    Session-scoped state that outlives a single round.

    Scores live on the participants; hands and moves are round-scoped
    and reset by the engine between rounds.
    """

    player: Participant
    dealer: Participant
    deck: Deck
    rounds_played: int = 0
    ties: int = 0

    @classmethod
    def create(
        cls,
        player_name: str,
        dealer_name: str | None = None,
        dealer_threshold: int = DEALER_THRESHOLD,
        dealer_names: Sequence[str] = DEALER_NAMES,
        rng: Random | None = None,
    ) -> "Session":
        """Build a session with a human player, a rule-based dealer and a fresh deck."""
        rng = rng or Random()
        return cls(
            player=Participant.player(player_name),
            dealer=Participant.dealer(
                dealer_name,
                threshold=dealer_threshold,
                names=dealer_names,
                rng=rng,
            ),
            deck=Deck(rng=rng),
        )


@dataclass(frozen=True)
class RoundResult:
    """Outcome of one play-through, seen from the player's side."""

    outcome: Outcome
    winner: str | None
    player_total: int
    dealer_total: int
    player_blackjack: bool = False
    dealer_blackjack: bool = False
    player_busted: bool = False
    dealer_busted: bool = False

    @property
    def is_push(self) -> bool:
        """Both participants were dealt blackjack."""
        return self.player_blackjack and self.dealer_blackjack


class TwentyOneGame:
    """
    Twenty-One round engine using a state machine.

    The engine never reads or writes the terminal. Human moves come from
    the `ask_player` callback and everything else is announced as events.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = machine_transitions()

    def __init__(self, session: Session, ask_player: AskMove | None = None) -> None:
        """
        Initialize the engine for a session.

        Args:
            session: Participants, deck and running totals
            ask_player: Callback returning the human's move
        """
        self.session = session
        self.ask_player = ask_player
        self.events = EventEmitter()
        self.result: RoundResult | None = None

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="dealing_initial",
            auto_transitions=False,
            model_attribute="_machine_state",
        )
        self._reset_round()

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    @property
    def player(self) -> Participant:
        return self.session.player

    @property
    def dealer(self) -> Participant:
        return self.session.dealer

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def _require(self, state: GameState) -> None:
        if self.state != state:
            raise MachineError(f"Cannot do that in state {self.state}, expected {state}")

    def _reset_round(self) -> None:
        """New shuffled deck, cleared hands and moves. Scores are kept."""
        self.session.deck.reset()
        self.player.reset_round()
        self.dealer.reset_round()
        self.result = None
        self.events.emit_new(EventType.DECK_SHUFFLED, cards_remaining=len(self.session.deck))

    def _deal_to(self, participant: Participant, face_up: bool = True) -> Card:
        """Deal one card from the deck to a participant."""
        card = self.session.deck.deal()
        participant.hand.add_card(card)
        logger.debug("Dealt %r to %s (total %d)", card, participant.name, participant.hand.value)
        self.events.emit_new(
            EventType.CARD_DEALT,
            participant=participant.name,
            is_dealer=participant is self.dealer,
            card=str(card) if face_up else "??",
            face_up=face_up,
            hand_value=participant.hand.value if face_up else None,
        )
        return card

    def deal_initial(self) -> None:
        """Deal two cards to the player, then two to the dealer."""
        self._require(GameState.DEALING_INITIAL)
        if self.session.rounds_played == 0:
            self.events.emit_new(
                EventType.GAME_STARTED,
                player=self.player.name,
                dealer=self.dealer.name,
            )
        self.events.emit_new(EventType.ROUND_STARTED, round=self.session.rounds_played + 1)

        for _ in range(STARTING_HAND):
            self._deal_to(self.player)
        self._deal_to(self.dealer)
        for _ in range(STARTING_HAND - 1):
            self._deal_to(self.dealer, face_up=False)

        self.cards_dealt()

    def check_blackjack(self) -> bool:
        """
        Look for naturals.

        Returns:
            True if anyone has blackjack, in which case play is skipped
        """
        self._require(GameState.CHECKING_BLACKJACK)
        player_bj = self.player.hand.is_blackjack
        dealer_bj = self.dealer.hand.is_blackjack

        if player_bj and dealer_bj:
            self.events.emit_new(EventType.PUSH)
        elif player_bj:
            self.events.emit_new(EventType.PLAYER_BLACKJACK, participant=self.player.name)
        elif dealer_bj:
            self.events.emit_new(EventType.DEALER_BLACKJACK, participant=self.dealer.name)

        if player_bj or dealer_bj:
            logger.debug("Blackjack found (player=%s, dealer=%s)", player_bj, dealer_bj)
            self.blackjack_found()
            return True

        self.no_blackjack()
        return False

    def _take_turn(
        self,
        participant: Participant,
        hit_event: EventType,
        stay_event: EventType,
        bust_event: EventType,
    ) -> None:
        """Hit until the participant stays or busts."""
        is_dealer = participant is self.dealer
        self.events.emit_new(
            EventType.TURN_STARTED,
            participant=participant.name,
            is_dealer=is_dealer,
            hand_value=participant.hand.value,
        )
        while True:
            move = participant.decide(self.ask_player)
            logger.debug("%s chose %s at %d", participant.name, move, participant.hand.value)
            if move == Move.STAY:
                self.events.emit_new(
                    stay_event,
                    participant=participant.name,
                    is_dealer=is_dealer,
                    hand_value=participant.hand.value,
                )
                return

            card = self._deal_to(participant)
            self.events.emit_new(
                hit_event,
                participant=participant.name,
                is_dealer=is_dealer,
                card=str(card),
                hand_value=participant.hand.value,
            )
            if participant.hand.is_busted:
                self.events.emit_new(
                    bust_event,
                    participant=participant.name,
                    is_dealer=is_dealer,
                    hand_value=participant.hand.value,
                )
                return

    def play_player_turn(self) -> None:
        """Run the human's hit/stay loop. A bust skips the dealer's turn."""
        self._require(GameState.PLAYER_TURN)
        self._take_turn(
            self.player,
            EventType.PLAYER_HIT,
            EventType.PLAYER_STAY,
            EventType.PLAYER_BUSTS,
        )
        if self.player.hand.is_busted:
            self.player_busted()
        else:
            self.player_done()

    def play_dealer_turn(self) -> None:
        """Dealer hits while below its threshold."""
        self._require(GameState.DEALER_TURN)
        self._take_turn(
            self.dealer,
            EventType.DEALER_HIT,
            EventType.DEALER_STAY,
            EventType.DEALER_BUSTS,
        )
        self.dealer_done()

    def reveal(self) -> None:
        """Show both hands in full."""
        self._require(GameState.REVEAL)
        self.events.emit_new(
            EventType.REVEAL,
            player=self.player.name,
            player_cards=[str(c) for c in self.player.hand],
            player_total=self.player.hand.value,
            player_busted=self.player.hand.is_busted,
            dealer=self.dealer.name,
            dealer_cards=[str(c) for c in self.dealer.hand],
            dealer_total=self.dealer.hand.value,
            dealer_busted=self.dealer.hand.is_busted,
        )
        self.cards_revealed()

    def score(self) -> RoundResult:
        """Compare hands, award the point and record the round result."""
        self._require(GameState.SCORING)
        player_hand = self.player.hand
        dealer_hand = self.dealer.hand
        outcome = classify(player_hand, dealer_hand)

        winner: str | None = None
        if outcome == Outcome.WIN:
            self.player.add_score()
            winner = self.player.name
            self.events.emit_new(EventType.PLAYER_WINS, participant=winner)
        elif outcome == Outcome.LOSS:
            self.dealer.add_score()
            winner = self.dealer.name
            self.events.emit_new(EventType.DEALER_WINS, participant=winner)
        elif outcome == Outcome.BOTH_BUSTED:
            self.events.emit_new(EventType.EVERYONE_BUSTED)
        else:
            self.session.ties += 1
            self.events.emit_new(EventType.TIE)

        self.session.rounds_played += 1
        self.result = RoundResult(
            outcome=outcome,
            winner=winner,
            player_total=player_hand.value,
            dealer_total=dealer_hand.value,
            player_blackjack=player_hand.is_blackjack,
            dealer_blackjack=dealer_hand.is_blackjack,
            player_busted=player_hand.is_busted,
            dealer_busted=dealer_hand.is_busted,
        )
        logger.debug("Round %d scored: %s", self.session.rounds_played, self.result)
        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=outcome.value,
            winner=winner,
            player_score=self.player.score,
            dealer_score=self.dealer.score,
        )
        self.round_scored()
        return self.result

    def play_round(self) -> RoundResult:
        """Run one round from the initial deal to the replay prompt."""
        self.deal_initial()
        if not self.check_blackjack():
            self.play_player_turn()
            if self.state == GameState.DEALER_TURN:
                self.play_dealer_turn()
        self.reveal()
        return self.score()

    def finish(self, replay: bool) -> None:
        """
        Answer the replay prompt.

        Args:
            replay: True to reset for another round, False to end the game
        """
        self._require(GameState.AWAITING_REPLAY)
        if replay:
            self._reset_round()
            self.play_again()
            return

        self.events.emit_new(
            EventType.GAME_ENDED,
            rounds=self.session.rounds_played,
            player_score=self.player.score,
            dealer_score=self.dealer.score,
            ties=self.session.ties,
        )
        self.end_game()

    @property
    def is_over(self) -> bool:
        return self.state == GameState.ENDED
