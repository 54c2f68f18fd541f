"""Renders the round to the terminal by listening to engine events."""

from console import art
from console.terminal import Terminal
from twentyone.game import EventType, GameEvent, TwentyOneGame
from twentyone.hand import Outcome
from twentyone.participant import Participant

CARD_COLUMNS = 18


class TableDisplay:
    """
    Display collaborator.

    Subscribes to the engine's events and draws hands, totals, banners
    and the running score. It only reads game state, never changes it.
    """

    def __init__(self, terminal: Terminal, game: TwentyOneGame) -> None:
        self.terminal = terminal
        self.game = game

        handlers = {
            EventType.PUSH: self._on_push,
            EventType.PLAYER_BLACKJACK: self._on_player_blackjack,
            EventType.DEALER_BLACKJACK: self._on_dealer_blackjack,
            EventType.TURN_STARTED: self._on_turn_started,
            EventType.PLAYER_HIT: self._on_hit,
            EventType.DEALER_HIT: self._on_dealer_hit,
            EventType.PLAYER_STAY: self._on_stay,
            EventType.DEALER_STAY: self._on_stay,
            EventType.REVEAL: self._on_reveal,
            EventType.ROUND_ENDED: self._on_round_ended,
            EventType.GAME_ENDED: self._on_game_ended,
        }
        for event_type, handler in handlers.items():
            game.subscribe(handler, event_type)

    @property
    def width(self) -> int:
        sizes = [len(self.game.player.hand), len(self.game.dealer.hand), 1]
        return CARD_COLUMNS * max(sizes) + len(self.game.player.name)

    def center(self, text: str, fill: str = " ") -> None:
        self.terminal.center(text, self.width, fill)

    # Hands

    def show_hand(self, participant: Participant) -> None:
        """Draw every card of a hand."""
        self.terminal.write(art.render_cards(participant.hand))
        self.terminal.write()

    def show_hidden(self, participant: Participant) -> None:
        """Draw the first card and mask the rest."""
        self.terminal.write(f"{participant.name} has {len(participant.hand)} cards.")
        self.terminal.write(art.render_hidden(participant.hand.cards))

    def show_total(self, participant: Participant) -> None:
        self.terminal.write(f"Current Total Value: {participant.hand.value}")

    def show_player_cards(self, participant: Participant) -> None:
        self.terminal.write()
        self.terminal.write(
            f"{participant.name}, you have the following {len(participant.hand)} cards:\n"
        )
        self.show_hand(participant)
        self.show_total(participant)

    def show_decision_table(self, participant: Participant) -> None:
        """Everything the player sees before choosing hit or stay."""
        if len(self.game.dealer.hand) == 2:
            self.show_hidden(self.game.dealer)
        self.show_player_cards(participant)

    def show_dealer_cards(self) -> None:
        dealer = self.game.dealer
        self.terminal.clear()
        self.terminal.write(f"The Dealer, {dealer.name}'s Cards:")
        self.show_hand(dealer)
        self.show_total(dealer)
        self.terminal.write()

    # Event handlers

    def _on_push(self, event: GameEvent) -> None:
        self.terminal.clear()
        self.terminal.write("PUSH!")

    def _on_player_blackjack(self, event: GameEvent) -> None:
        self.terminal.clear()
        self.terminal.write(f"{event.participant}, YOU HAVE BLACKJACK!")
        self.terminal.pause(long=True)

    def _on_dealer_blackjack(self, event: GameEvent) -> None:
        self.terminal.clear()
        self.terminal.write("Dealer has Blackjack")
        self.terminal.pause(long=True)

    def _on_turn_started(self, event: GameEvent) -> None:
        if event.is_dealer:
            self.terminal.pause()
            self.show_dealer_cards()
        else:
            self.terminal.clear()

    def _on_hit(self, event: GameEvent) -> None:
        self.terminal.write(f"{event.participant} HITS!")
        self.terminal.pause()
        self.terminal.clear()

    def _on_dealer_hit(self, event: GameEvent) -> None:
        self.terminal.write(f"{event.participant} HITS!")
        self.terminal.pause()
        self.show_dealer_cards()

    def _on_stay(self, event: GameEvent) -> None:
        self.terminal.write(f"{event.participant} STAYS!")
        self.terminal.pause()

    def _on_reveal(self, event: GameEvent) -> None:
        player = self.game.player
        dealer = self.game.dealer
        busted = event.data["player_busted"] or event.data["dealer_busted"]

        self.terminal.clear()
        self.terminal.write()
        self.center(" DEALER'S CARDS ", "=")
        self.show_hand(dealer)
        self.center(f" [Total value is: {event.data['dealer_total']}] ", "=")
        self.terminal.write()
        self.center(" BUSTED! " if busted else " CARD REVEAL ")
        self.terminal.write()
        self.center(" PLAYER'S CARDS ", "=")
        self.show_hand(player)
        self.center(f" [Total value is: {event.data['player_total']}] ", "=")
        self.terminal.write()
        self.terminal.continue_any_key()

    def _on_round_ended(self, event: GameEvent) -> None:
        player = self.game.player
        dealer = self.game.dealer

        self.terminal.clear()
        self.center(":", ":")
        outcome = event.data["outcome"]
        if outcome == Outcome.WIN.value:
            self.center(f"{player.name}, you WIN!")
        elif outcome == Outcome.LOSS.value:
            self.center(f"{dealer.name} WINS")
        elif outcome == Outcome.BOTH_BUSTED.value:
            self.center("Everyone BUSTED!")
        else:
            self.center("Its a TIE!")

        if player.hand.is_busted:
            self.center(f"{player.name}, you busted!")
        if dealer.hand.is_busted:
            self.center(f"{dealer.name} busted.")
        self.center(f"{dealer.name}'s total value is: {dealer.hand.value}")
        self.center(f"{player.name}'s total value is: {player.hand.value}")
        self.terminal.write()
        self.terminal.write()
        self.show_tally()
        self.show_play_again()

    def _on_game_ended(self, event: GameEvent) -> None:
        self.show_goodbye()

    # Banners

    def show_tally(self) -> None:
        player = self.game.player
        dealer = self.game.dealer
        self.center(" Game Score ")
        self.terminal.write()
        self.center(f" {dealer.name} [ {dealer.score} ] : {player.name} [ {player.score} ] ", ":")
        self.terminal.write()

    def show_play_again(self) -> None:
        self.center("Would you like to play again?")
        self.center("Press 'Enter' to go again")
        self.center("Enter 'e'/'3' to exit")
        self.terminal.write()
        self.center(":", ":")

    def show_goodbye(self) -> None:
        self.terminal.clear()
        self.center(":", ":")
        self.terminal.write(" ")
        self.center(" Final ")
        self.show_tally()
        self.center(" Thanks for playing! ")
        self.terminal.write(" ")
        self.center(":", ":")
