"""Rules shown from the welcome prompt."""

RULES_TEXT = """\
=============================== TWENTY-ONE ===============================

The goal is to finish with a hand worth more than the dealer's without
going over 21.

Card values
  * 2 through 10 are worth their face value.
  * Jack, Queen and King are worth 10.
  * An Ace is worth 11, or 1 if 11 would take the hand over 21.

Play
  * You and the dealer each get two cards. You only see one of the
    dealer's cards until the reveal.
  * Two cards worth 21 is Blackjack and wins on the spot. If you both
    have Blackjack the round is a PUSH and nobody scores.
  * On your turn, Hit to take another card or Stay to keep your hand.
  * Go over 21 and you bust: the dealer wins without playing.
  * The dealer then hits until its hand is worth 17 or more.

Winning
  * Whoever is closer to 21 without busting wins the round and scores a
    point. Equal totals are a tie.

==========================================================================
"""
