"""Risk scoring, history and persistence services.

Scoring (risk_factors, risk_engine, simulated_predictor, trend,
record_assembler) is pure; health_record_store is the only module that
talks to Firestore.
"""
