class UserInputRejected(Exception):
    """Base exception for guesses that are refused without changing state.

    `message` is the text shown to the player.
    """

    code = "rejected"
    message = "Entrada inválida."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class StationNotFound(UserInputRejected):
    code = "station_not_found"
    message = "Estação não encontrada."


class DuplicateGuess(UserInputRejected):
    code = "duplicate_guess"
    message = "Você já tentou essa estação."


class GameAlreadyFinished(UserInputRejected):
    code = "game_finished"
    message = "O jogo de hoje terminou."


class GameNotFinished(UserInputRejected):
    code = "game_not_finished"
    message = "O jogo de hoje ainda não terminou."
