from task_nlp.services.task_parser import TaskParser, parse


__all__ = ["TaskParser", "parse"]
