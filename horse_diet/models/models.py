from sqlalchemy import Column, Integer, String, Float

from horse_diet.core.database import Base


class Feed(Base):
    __tablename__ = "feeds"

    id = Column(Integer, primary_key=True, index=True)
    feed_id = Column(String, nullable=False, unique=True, index=True)
    name = Column(String, nullable=False)
    digestible_energy = Column(Float, nullable=False)  # Mcal/lb
    crude_protein = Column(Float, nullable=False)  # % of feed
    calcium = Column(Float, default=0)  # g/lb
    phosphorus = Column(Float, default=0)  # g/lb
    vitamin_e = Column(Float, default=0)  # IU/lb
