"""Wave progression and target lifecycle engine."""
