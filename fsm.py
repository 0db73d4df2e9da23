"""
A simple finite state machine (FSM) implementation.
"""

class State:
    """Base class for a state in the FSM."""
    def __init__(self, session):
        self.session = session

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def enter(self):
        """Code to execute when entering this state."""
        pass

    def exit(self):
        """Code to execute when exiting this state."""
        pass

    def update(self, dt: float):
        """Advance this state by one tick."""
        pass


class StateMachine:
    """A simple finite state machine."""
    def __init__(self, initial_state: State = None):
        self.current_state = None
        self._states = {}
        if initial_state:
            self.add_state(initial_state)
            self.set_state(initial_state.name)

    def add_state(self, state: State):
        """Adds a state to the machine."""
        self._states[state.name] = state

    def set_state(self, state_name: str):
        """Transitions to a new state."""
        new_state = self._states.get(state_name)
        if new_state is None:
            raise ValueError(f"State '{state_name}' not found.")
        if self.current_state:
            self.current_state.exit()
        self.current_state = new_state
        self.current_state.enter()

    @property
    def state_name(self):
        return self.current_state.name if self.current_state else None

    def update(self, dt: float):
        if self.current_state:
            self.current_state.update(dt)
