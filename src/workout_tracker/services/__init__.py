"""Operations over the workout document."""
