"""Squad Builder - CS player profiles and team synergy backend."""
