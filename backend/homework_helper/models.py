from __future__ import annotations
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Integer, Numeric, Text
from .db import Base


class Problem(Base):
	__tablename__ = "problems"
	id = Column(Integer, primary_key=True, autoincrement=True)
	user_email = Column(String(255), nullable=True, index=True)
	problem_text = Column(Text, nullable=False)
	user_solution = Column(Text, nullable=True)
	# Newline-joined step plan from the heuristic generator
	correct_solution = Column(Text, nullable=True)
	wolfram_solution = Column(Text, nullable=True)
	error_type = Column(String(100), nullable=True)
	error_description = Column(Text, nullable=True)
	confidence_score = Column(Numeric(3, 2, asdecimal=False), nullable=True)
	topic = Column(String(100), nullable=True)
	difficulty_level = Column(String(20), nullable=True)
	time_spent = Column(Integer, nullable=True)  # seconds, as reported by the client
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

	def to_dict(self) -> dict:
		return {
			"id": self.id,
			"problemstatement": self.problem_text,
			"user_solution": self.user_solution,
			"errortype": self.error_type,
			"error_description": self.error_description,
			"confidence_score": float(self.confidence_score) if self.confidence_score is not None else None,
			"topic": self.topic,
			"difficulty_level": self.difficulty_level,
			"correct_solution": self.correct_solution,
			"wolfram_solution": self.wolfram_solution,
			"timerecorded": self.created_at.isoformat() if self.created_at else None,
		}
