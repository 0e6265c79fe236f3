"""Interactive Rock, Paper, Scissors session."""

import logging

from ._errors import InvalidMoveError
from ._internal.console import Console
from ._internal.opponent import MoveProvider, RandomMoveProvider
from ._internal.rules import parse_move, resolve
from .types import GameOptions, Move, Outcome, RoundResult, SessionState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = frozenset({"exit", "quit"})
SCORE_COMMAND = "score"

BANNER = [
    "",
    "===================================",
    "Welcome to Rock, Paper, Scissors!",
    "===================================",
    "",
    "How to play:",
    '- Type "rock", "paper", or "scissors" to make your move',
    '- Type "score" to see the current score',
    '- Type "exit" or "quit" to end the game',
    "",
]

OUTCOME_MESSAGES: dict[Outcome, str] = {
    "tie": "It's a tie!",
    "player": "You win this round!",
    "computer": "Computer wins this round!",
}


class GameSession:
    """
    A single game of Rock, Paper, Scissors against the computer.

    The session owns its score tally and takes the opponent's moves from a
    MoveProvider, so rounds are reproducible when the provider is seeded or
    fixed. Terminal I/O goes through a Console passed to run_loop().

    Example:
        ```python
        session = GameSession(options=GameOptions(seed=7))
        result = session.play_round("rock")
        print(result.outcome, session.state.games_played)

        # Interactive play on stdin/stdout
        anyio.run(session.run_loop, StdioConsole())
        ```
    """

    def __init__(
        self,
        options: GameOptions | None = None,
        move_provider: MoveProvider | None = None,
    ):
        """Initialize a session with zeroed scores."""
        if options is None:
            options = GameOptions()
        self.options = options
        self.move_provider = move_provider or RandomMoveProvider(seed=options.seed)
        self.state = SessionState()
        self._terminated = False

    @property
    def terminated(self) -> bool:
        """Whether run_loop() has reached its final state."""
        return self._terminated

    def choose_opponent_move(self) -> Move:
        return self.move_provider.next_move()

    @staticmethod
    def resolve(player_move: Move, opponent_move: Move) -> Outcome:
        return resolve(player_move, opponent_move)

    def play_round(self, player_move: Move) -> RoundResult:
        """
        Play one round and record it in the session state.

        The move is normalized like console input, so " Rock " plays as rock.

        Args:
            player_move: The player's move

        Returns:
            RoundResult with both moves and the outcome

        Raises:
            InvalidMoveError: If player_move is not a valid move
        """
        move = parse_move(player_move)
        opponent_move = self.choose_opponent_move()
        outcome = self.resolve(move, opponent_move)
        self.state.record(outcome)

        logger.debug(
            "Round %d: player=%s computer=%s outcome=%s",
            self.state.games_played,
            move,
            opponent_move,
            outcome,
        )
        return RoundResult(
            player_move=move, opponent_move=opponent_move, outcome=outcome
        )

    def format_scoreboard(self) -> str:
        state = self.state
        return "\n".join(
            [
                "----- CURRENT SCORE -----",
                f"Games played: {state.games_played}",
                f"You: {state.player_wins}",
                f"Computer: {state.computer_wins}",
                f"Ties: {state.ties}",
                "------------------------",
            ]
        )

    async def run_loop(self, console: Console) -> SessionState:
        """
        Prompt for moves until the user exits or input runs out.

        Args:
            console: Console used for prompts and output

        Returns:
            The final session state
        """
        if self._terminated:
            return self.state

        logger.info("Game session started")

        if self.options.show_banner:
            for line in BANNER:
                await console.write_line(line)

        while not self._terminated:
            line = await console.read_line(self.options.prompt)
            if line is None:
                logger.info("Input closed, ending session")
                self._terminated = True
                break
            await self._handle_input(console, line.strip().lower())

        logger.info(
            "Game session ended after %d games", self.state.games_played
        )
        return self.state

    async def _handle_input(self, console: Console, command: str) -> None:
        if command in EXIT_COMMANDS:
            await console.write_line()
            await console.write_line("Thanks for playing!")
            await console.write_line("Final score:")
            await self._write_scoreboard(console)
            self._terminated = True
            return

        if command == SCORE_COMMAND:
            await self._write_scoreboard(console)
            return

        try:
            result = self.play_round(command)
        except InvalidMoveError as e:
            logger.debug("Rejected input %r", e.value)
            await console.write_line(str(e))
            return

        await console.write_line(f"You chose: {result.player_move}")
        await console.write_line(f"Computer chose: {result.opponent_move}")
        await console.write_line(OUTCOME_MESSAGES[result.outcome])
        await self._write_scoreboard(console)

    async def _write_scoreboard(self, console: Console) -> None:
        await console.write_line()
        for line in self.format_scoreboard().splitlines():
            await console.write_line(line)
        await console.write_line()
